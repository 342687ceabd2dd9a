"""
Cooperative suspension points on top of the Qt event loop.

The engine never blocks: it either waits a fixed delay or waits for the next
display frame, and resumes inside a timer callback on the GUI thread.
"""
from typing import Callable

from PyQt5 import QtCore

from chart.config import FRAME_INTERVAL_MS


class QtScheduler:
    """Schedules callbacks with single-shot Qt timers."""

    def __init__(self, frame_interval_ms: int = FRAME_INTERVAL_MS):
        self.frame_interval_ms = frame_interval_ms

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QtCore.QTimer.singleShot(delay_ms, callback)

    def request_frame(self, callback: Callable[[], None]) -> None:
        QtCore.QTimer.singleShot(self.frame_interval_ms, callback)
