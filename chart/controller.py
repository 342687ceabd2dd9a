"""
Plot controller: owns the live chart and the three producer entry points.

Producers call ``init`` when a run starts, then ``upsert`` for every measured
position and ``mark`` for every failed one. Each call carries the run identity
it was produced for; calls for any other run are dropped without a trace.
"""
import enum
import logging
from typing import Callable, Optional

from PyQt5 import QtCore

from chart.config import ChartConfig
from chart.epoch import RunEpoch, RunIdentity
from chart.failures import FailureOverlay
from chart.gate import DependencyGate
from chart.layout_sync import LayoutSynchronizer
from chart.series import SeriesStore

logger = logging.getLogger(__name__)


class ControllerState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class PlotController(QtCore.QObject):
    """
    Chart lifecycle and epoch-guarded dispatch.

    Signals:
        chart_ready(object run) - a chart for ``run`` was built and can take data
    """

    chart_ready = QtCore.pyqtSignal(object)

    def __init__(
        self,
        chart_factory: Callable,
        scheduler,
        gate: DependencyGate = None,
        companion=None,
        viewport=None,
        parent=None,
    ):
        """
        Initialize the controller.

        Args:
            chart_factory: ``factory(library, config, series, failures)`` returning a
                chart with update(), destroy() and rendered_width()
            scheduler: Provides call_later() and request_frame()
            gate: Dependency gate, a default one on ``scheduler`` if omitted
            companion: Control kept as wide as the chart (optional)
            viewport: Window whose resizes trigger re-syncs (optional)
            parent: Parent QObject
        """
        super().__init__(parent)
        self.chart_factory = chart_factory
        self.scheduler = scheduler
        self.gate = gate or DependencyGate(scheduler)
        self.epoch = RunEpoch()

        self.chart = None
        self.state = ControllerState.UNINITIALIZED
        self.series = SeriesStore()
        self.failures = FailureOverlay()

        self.viewport = viewport
        self.synchronizer: Optional[LayoutSynchronizer] = None
        if companion is not None:
            self.synchronizer = LayoutSynchronizer(
                scheduler, self._chart_width, companion, parent=self
            )

    @property
    def active_run(self) -> Optional[RunIdentity]:
        return self.epoch.active

    # ==========================================================================
    # Producer Entry Points
    # ==========================================================================

    def init(self, axis_min: float, axis_max: float, run: RunIdentity) -> None:
        """
        Start a new run: drop the old chart, then build an empty one once the
        graphing backend is available.
        """
        self._teardown()
        self.epoch.set_active(run)
        self.gate.cancel()

        series = SeriesStore()
        failures = FailureOverlay()
        self.series = series
        self.failures = failures

        config = ChartConfig(x_min=axis_min, x_max=axis_max)
        logger.info(f"Initializing chart for {run} on [{axis_min}, {axis_max}]")
        self.gate.await_ready(lambda library: self._build(library, config, run, series, failures))

    def upsert(self, position: float, value: float, run: RunIdentity) -> None:
        if self.chart is None or not self.epoch.is_active(run):
            return
        self.series.upsert(position, value)
        self.chart.update()

    def mark(self, position: float, run: RunIdentity) -> None:
        if self.chart is None or not self.epoch.is_active(run):
            return
        if self.failures.mark(position):
            self.chart.update()

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    def _build(self, library, config: ChartConfig, run: RunIdentity,
               series: SeriesStore, failures: FailureOverlay) -> None:
        # A newer init took over while we were waiting
        if not self.epoch.is_active(run):
            return

        self._teardown()
        self.chart = self.chart_factory(library, config, series, failures)
        self.state = ControllerState.READY

        if self.synchronizer is not None and self.viewport is not None:
            self.synchronizer.arm(self.viewport)

        logger.info(f"Chart ready for {run}")
        self.chart_ready.emit(run)

    def _teardown(self) -> None:
        if self.synchronizer is not None:
            self.synchronizer.disarm()
        if self.chart is not None:
            self.chart.destroy()
            self.chart = None
        self.state = ControllerState.UNINITIALIZED

    def _chart_width(self) -> float:
        if self.chart is None:
            return 0
        return self.chart.rendered_width()
