"""
Background sweep worker: measures every target of a run off the GUI thread.
"""
import logging
from typing import Callable, Iterable, List

from PyQt5 import QtCore

from chart.epoch import RunIdentity

logger = logging.getLogger(__name__)


class MeasurementError(Exception):
    """A similarity could not be computed for one target."""


class SweepWorker(QtCore.QThread):
    """
    Evaluates targets in the given order and reports each result.

    Every emitted result carries the run identity the worker was started for,
    so results that arrive after a newer run started can be told apart.

    Signals:
        sample_ready(int target, float similarity, object run)
        sample_failed(int target, object run)
        status_update(str message)
    """
    sample_ready = QtCore.pyqtSignal(int, float, object)
    sample_failed = QtCore.pyqtSignal(int, object)
    status_update = QtCore.pyqtSignal(str)

    def __init__(
        self,
        run_identity: RunIdentity,
        targets: Iterable[int],
        measure: Callable[[int, RunIdentity], float],
        skip: Iterable[int] = (),
        parent=None,
    ):
        """
        Args:
            run_identity: Run the results belong to
            targets: Targets in evaluation order
            measure: ``measure(target, run)`` returning a 0-100 similarity or
                raising MeasurementError
            skip: Targets that already have a result (cache hits)
            parent: Parent QObject
        """
        super().__init__(parent)
        self.run_identity = run_identity
        self.targets: List[int] = list(targets)
        self.measure = measure
        self.skip = set(skip)
        self.running = False
        self._stop_requested = False

    def run(self):
        # stop() may land before the thread is scheduled
        if self._stop_requested:
            logger.info(f"Sweep for {self.run_identity} stopped before it started")
            return

        self.running = True
        pending = [t for t in self.targets if t not in self.skip]
        self.status_update.emit(f"Measuring {len(pending)} targets for {self.run_identity}")
        logger.info(f"Sweep started: {len(pending)} targets, {len(self.skip)} cached")

        done = 0
        for target in pending:
            if self._stop_requested:
                logger.info(f"Sweep for {self.run_identity} stopped after {done} targets")
                break

            try:
                similarity = self.measure(target, self.run_identity)
            except MeasurementError as e:
                logger.warning(f"Target {target} failed: {e}")
                self.sample_failed.emit(target, self.run_identity)
            else:
                self.sample_ready.emit(target, float(similarity), self.run_identity)
            done += 1

        self.running = False
        self.status_update.emit(f"Sweep finished ({done}/{len(pending)})")

    def stop(self):
        self._stop_requested = True
        self.running = False
