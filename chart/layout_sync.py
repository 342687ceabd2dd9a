"""
Keeps the companion control as wide as the rendered chart.
"""
import logging
from typing import Callable

from PyQt5 import QtCore

from chart.config import INITIAL_SYNC_DELAY_MS, SLIDER_WIDTH_BUFFER

logger = logging.getLogger(__name__)


class LayoutSynchronizer(QtCore.QObject):
    """
    Applies ``chart width - buffer`` to the companion control.

    Listens for resize events on the viewport through a Qt event filter. Any
    number of resizes before the next frame produce a single sync pass.
    """

    def __init__(self, scheduler, measure: Callable[[], float], companion,
                 buffer: int = SLIDER_WIDTH_BUFFER, parent=None):
        """
        Args:
            scheduler: Provides call_later() and request_frame()
            measure: Returns the chart's rendered width in pixels
            companion: Control with a setFixedWidth(int) method
            buffer: Pixels subtracted from the chart width
        """
        super().__init__(parent)
        self.scheduler = scheduler
        self.measure = measure
        self.companion = companion
        self.buffer = buffer

        self.viewport = None
        self._frame_pending = False
        self._generation = 0

    @property
    def armed(self) -> bool:
        return self.viewport is not None

    def arm(self, viewport) -> None:
        """Sync now, then follow resizes of ``viewport``. Replaces any earlier subscription."""
        self.disarm()
        self.viewport = viewport
        viewport.installEventFilter(self)

        self.sync()
        generation = self._generation
        self.scheduler.call_later(INITIAL_SYNC_DELAY_MS, lambda: self._settle(generation))

    def disarm(self) -> None:
        if self.viewport is not None:
            self.viewport.removeEventFilter(self)
            self.viewport = None
        # Invalidates any scheduled pass
        self._generation += 1
        self._frame_pending = False

    def eventFilter(self, watched, event):
        if event.type() == QtCore.QEvent.Resize:
            self.handle_resize()
        return False

    def handle_resize(self) -> None:
        if self._frame_pending:
            return
        self._frame_pending = True
        generation = self._generation
        self.scheduler.request_frame(lambda: self._run_pass(generation))

    def sync(self) -> None:
        width = int(self.measure()) - self.buffer
        self.companion.setFixedWidth(max(width, 0))
        logger.debug(f"Companion width set to {max(width, 0)}px")

    def _run_pass(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._frame_pending = False
        self.sync()

    def _settle(self, generation: int) -> None:
        if generation == self._generation:
            self.sync()
