"""
Main window for the similarity dashboard.
"""
import logging

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QSpinBox,
    QGroupBox,
)
from matplotlib.figure import Figure

from chart import DependencyGate, PlotController, QtScheduler, RunIdentity
from chart.formatting import TimeParseError, format_ms_min_sec, parse_time_to_ms
from measurement import (
    ResultCache, SLIDER_MAX_INDEX, SweepWorker, SyntheticMeasure, sweep_targets,
    target_from_index, target_step,
)
from ui.canvases import SimilarityChart
from ui.styles import LIGHT_STYLESHEET, STATUS_ERROR, STATUS_INFO

logger = logging.getLogger(__name__)

MAX_LAP_COUNT = 100
MAX_PLAYER_COUNT = 250


class MainWindow(QMainWindow):
    """
    Dashboard window.

    Displays:
    - Run parameters (lap count, player count) and a start button
    - Live similarity chart over the target range
    - Target slider, kept as wide as the chart
    - Status banner (selected target, run, cache coverage, input errors)
    """

    def __init__(
        self,
        gate_probe,
        target_min: int = 0,
        target_max: int = 300_000,
        default_lap_count: int = 25,
        default_player_count: int = 32,
        measure=None,
    ):
        """
        Args:
            gate_probe: Returns the matplotlib Qt backend module once it is loaded
            target_min: Lower end of the target range [ms]
            target_max: Upper end of the target range [ms]
            default_lap_count: Initial lap count input
            default_player_count: Initial player count input
            measure: ``measure(target, run)`` producer, synthetic if omitted
        """
        super().__init__()

        self.setWindowTitle("Random Karma - Similarity")
        self.resize(1000, 520)

        self.target_min = target_min
        self.target_max = target_max
        self.measure = measure or SyntheticMeasure(target_min, target_max, delay_s=0.05)

        self.cache = ResultCache()
        self.worker = None
        self._retired_workers = []

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(12, 12, 12, 12)
        root_layout.setSpacing(8)
        central.setLayout(root_layout)

        root_layout.addWidget(self._build_run_controls(default_lap_count, default_player_count))
        root_layout.addWidget(self._build_chart_panel(), 1)

        self.status_label = QLabel("Waiting for chart...")
        root_layout.addWidget(self.status_label)

        self.setStyleSheet(LIGHT_STYLESHEET)

        # Engine
        scheduler = QtScheduler()
        self.controller = PlotController(
            chart_factory=self.build_chart,
            scheduler=scheduler,
            gate=DependencyGate(scheduler, probe=gate_probe),
            companion=self.target_slider,
            viewport=self,
            parent=self,
        )
        self.controller.chart_ready.connect(self._on_chart_ready)

        self._update_status()

    # ==========================================================================
    # Layout
    # ==========================================================================

    def _build_run_controls(self, lap_count: int, player_count: int):
        """Build the run parameter row."""
        group = QGroupBox("Run")
        layout = QHBoxLayout()
        group.setLayout(layout)

        self.lap_spin = QSpinBox()
        self.lap_spin.setRange(1, MAX_LAP_COUNT)
        self.lap_spin.setValue(lap_count)

        self.player_spin = QSpinBox()
        self.player_spin.setRange(0, MAX_PLAYER_COUNT)
        self.player_spin.setValue(player_count)

        self.start_button = QPushButton("Start Run")
        self.start_button.clicked.connect(self.start_run)

        layout.addWidget(QLabel("Laps:"))
        layout.addWidget(self.lap_spin)
        layout.addWidget(QLabel("Players:"))
        layout.addWidget(self.player_spin)
        layout.addStretch()
        layout.addWidget(self.start_button)

        return group

    def _build_chart_panel(self):
        """Build the chart host, the target slider and the target input."""
        group = QGroupBox("Jaccard Similarity")
        layout = QVBoxLayout()
        group.setLayout(layout)

        # The canvas is added here once the backend has loaded
        self.chart_host = QWidget()
        self.chart_layout = QVBoxLayout()
        self.chart_layout.setContentsMargins(0, 0, 0, 0)
        self.chart_host.setLayout(self.chart_layout)
        layout.addWidget(self.chart_host, 1)

        self.target_slider = QSlider(QtCore.Qt.Horizontal)
        self.target_slider.setRange(0, SLIDER_MAX_INDEX)
        self.target_slider.valueChanged.connect(self._on_slider_moved)
        layout.addWidget(self.target_slider, 0, QtCore.Qt.AlignHCenter)

        input_row = QHBoxLayout()
        self.target_input = QLineEdit()
        self.target_input.setPlaceholderText("Target time, e.g. 2:30 or 150s")
        self.target_input.returnPressed.connect(self._on_target_entered)
        input_row.addWidget(QLabel("Target:"))
        input_row.addWidget(self.target_input)
        layout.addLayout(input_row)

        return group

    # ==========================================================================
    # Chart
    # ==========================================================================

    def build_chart(self, library, config, series, failures):
        """Chart factory for the controller: a fresh canvas in the chart host."""
        canvas = library.FigureCanvasQTAgg(Figure(figsize=(6, 2.5), dpi=100))
        canvas.setParent(self.chart_host)
        self.chart_layout.addWidget(canvas)

        def drop_canvas():
            self.chart_layout.removeWidget(canvas)
            canvas.deleteLater()

        return SimilarityChart(canvas.figure, config, series, failures, on_destroy=drop_canvas)

    # ==========================================================================
    # Run Handling
    # ==========================================================================

    def current_run(self) -> RunIdentity:
        return RunIdentity(self.lap_spin.value(), self.player_spin.value())

    def start_run(self):
        """Supersede the current run and start measuring the new one."""
        run = self.current_run()
        self._stop_worker()
        self.controller.init(self.target_min, self.target_max, run)
        self._update_status()

    def _on_chart_ready(self, run):
        # Cached results first, then measure only what is missing
        cached = []
        for target, similarity in list(self.cache.results_for(run)):
            self.controller.upsert(target, similarity, run)
            cached.append(target)

        targets = sweep_targets(self.target_min, self.target_max)
        self.worker = SweepWorker(run, targets, self.measure, skip=cached)
        self.worker.sample_ready.connect(self._on_sample_ready)
        self.worker.sample_failed.connect(self._on_sample_failed)
        self.worker.status_update.connect(lambda msg: logger.info(f"[Sweep] {msg}"))
        self.worker.start()
        self._update_status()

    def _stop_worker(self):
        if self.worker is None:
            return
        retired = self.worker
        self.worker = None
        retired.stop()

        # Results it still emits are dropped by the controller
        self._retired_workers.append(retired)
        retired.finished.connect(lambda: self._retire_finished(retired))
        if not retired.isRunning():
            # Already done, ``finished`` will not come again
            self._retire_finished(retired)

    def _retire_finished(self, worker):
        if worker not in self._retired_workers:
            return
        self._retired_workers.remove(worker)
        worker.deleteLater()

    def _on_sample_ready(self, target: int, similarity: float, run):
        try:
            self.cache.put(target, run, similarity)
            self.controller.upsert(target, similarity, run)
            self._update_status()
        except Exception as e:
            logger.error(f"Error handling sample {target}: {e}", exc_info=True)

    def _on_sample_failed(self, target: int, run):
        try:
            self.controller.mark(target, run)
        except Exception as e:
            logger.error(f"Error marking failed target {target}: {e}", exc_info=True)

    # ==========================================================================
    # Target Selection
    # ==========================================================================

    def selected_target(self) -> int:
        return target_from_index(self.target_min, self.target_max, self.target_slider.value())

    def _on_slider_moved(self, _idx: int):
        self._update_status()

    def _on_target_entered(self):
        try:
            target = parse_time_to_ms(self.target_input.text())
        except TimeParseError as e:
            self._show_status(str(e), STATUS_ERROR)
            return

        step = target_step(self.target_min, self.target_max)
        idx = round((target - self.target_min) / step)
        self.target_slider.setValue(max(0, min(idx, SLIDER_MAX_INDEX)))
        self._update_status()

    # ==========================================================================
    # Status Banner
    # ==========================================================================

    def _update_status(self):
        run = self.controller.active_run
        target = format_ms_min_sec(self.selected_target())
        if run is None:
            self._show_status(f"Target {target} - press Start Run", STATUS_INFO)
            return

        cached = self.cache.cached_count(self.target_min, self.target_max, run)
        self._show_status(
            f"Target {target} | {run.lap_count} laps, {run.player_count} players"
            f" | {cached}/{SLIDER_MAX_INDEX + 1} cached",
            STATUS_INFO,
        )

    def _show_status(self, text: str, color: str):
        self.status_label.setText(text)
        self.status_label.setStyleSheet(f"color: {color};")

    def closeEvent(self, event):
        for worker in [self.worker, *self._retired_workers]:
            if worker is not None:
                worker.stop()
                worker.wait()
        super().closeEvent(event)
