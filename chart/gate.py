"""
Dependency gate: waits for the graphing backend to be importable-and-imported.

The dashboard imports the matplotlib Qt backend on a background thread so the
window appears immediately. Anything that needs a chart goes through the gate,
which polls for the module on a fixed delay and gives up after a bounded
number of attempts.
"""
import enum
import logging
import sys
from types import ModuleType
from typing import Callable, Optional

from chart.config import MAX_RETRY_ATTEMPTS, RETRY_DELAY_MS

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "matplotlib.backends.backend_qt5agg"


class GateOutcome(enum.Enum):
    PENDING = "pending"
    READY = "ready"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"


def module_probe(module_name: str) -> Callable[[], Optional[ModuleType]]:
    """
    Return a probe that reports the module once it is in ``sys.modules``.

    Only safe for backends imported synchronously on the GUI thread: a module
    shows up in ``sys.modules`` when its import starts, not when it finishes.
    The dashboard imports on a ``BackendLoader`` thread and passes
    ``BackendLoader.probe`` instead.
    """
    def probe():
        return sys.modules.get(module_name)
    return probe


class DependencyGate:
    """
    Bounded polling loop for the graphing backend.

    Only one wait is tracked at a time; starting a new wait abandons the old one.
    """

    def __init__(
        self,
        scheduler,
        probe: Callable[[], Optional[ModuleType]] = None,
        delay_ms: int = RETRY_DELAY_MS,
        max_attempts: int = MAX_RETRY_ATTEMPTS,
    ):
        self.scheduler = scheduler
        self.probe = probe or module_probe(DEFAULT_BACKEND)
        self.delay_ms = delay_ms
        self.max_attempts = max_attempts

        self.outcome = GateOutcome.PENDING
        self.attempts = 0
        self._generation = 0

    def await_ready(
        self,
        on_ready: Callable[[ModuleType], None],
        on_done: Optional[Callable[[GateOutcome], None]] = None,
    ) -> None:
        """
        Call ``on_ready(library)`` as soon as the backend is available.

        The first check is synchronous. After ``max_attempts`` further checks
        the wait ends with ``GateOutcome.TIMEOUT`` and ``on_ready`` is never
        called. ``on_done`` receives the final outcome either way.
        """
        self._generation += 1
        self.attempts = 0
        self.outcome = GateOutcome.PENDING
        self._poll(self._generation, on_ready, on_done)

    def cancel(self) -> None:
        if self.outcome is GateOutcome.PENDING:
            self._generation += 1
            self._finish(GateOutcome.CANCELLED, None)

    def _poll(self, generation, on_ready, on_done) -> None:
        if generation != self._generation:
            return

        library = self.probe()
        if library is not None:
            self._finish(GateOutcome.READY, on_done)
            on_ready(library)
            return

        if self.attempts >= self.max_attempts:
            logger.error("Graphing backend did not load in time.")
            self._finish(GateOutcome.TIMEOUT, on_done)
            return

        self.attempts += 1
        self.scheduler.call_later(
            self.delay_ms, lambda: self._poll(generation, on_ready, on_done)
        )

    def _finish(self, outcome: GateOutcome, on_done) -> None:
        self.outcome = outcome
        if on_done is not None:
            on_done(outcome)
