import os

import matplotlib

matplotlib.use("Agg")

import pytest

from chart import DependencyGate, PlotController


class ManualScheduler:
    """Deterministic stand-in for QtScheduler: time only moves when told to."""

    def __init__(self):
        self.now = 0
        self.timers = []
        self.frames = []
        self._seq = 0

    def call_later(self, delay_ms, callback):
        self._seq += 1
        self.timers.append((self.now + delay_ms, self._seq, callback))

    def request_frame(self, callback):
        self.frames.append(callback)

    def advance(self, ms):
        end = self.now + ms
        while True:
            due = sorted(t for t in self.timers if t[0] <= end)
            if not due:
                break
            timer = due[0]
            self.timers.remove(timer)
            self.now = timer[0]
            timer[2]()
        self.now = end

    def flush_frame(self):
        frames, self.frames = self.frames, []
        for callback in frames:
            callback()


class FakeChart:
    def __init__(self, library, config, series, failures, width=640):
        self.library = library
        self.config = config
        self.series = series
        self.failures = failures
        self.width = width
        self.updates = 0
        self.destroyed = False

    def update(self):
        self.updates += 1

    def destroy(self):
        self.destroyed = True

    def rendered_width(self):
        return self.width


class FakeCompanion:
    def __init__(self):
        self.widths = []

    def setFixedWidth(self, width):
        self.widths.append(width)


class FakeViewport:
    def __init__(self):
        self.filters = []

    def installEventFilter(self, obj):
        self.filters.append(obj)

    def removeEventFilter(self, obj):
        self.filters.remove(obj)


class ChartRecorder:
    """Chart factory that remembers every chart it built."""

    def __init__(self):
        self.charts = []

    def __call__(self, library, config, series, failures):
        chart = FakeChart(library, config, series, failures)
        self.charts.append(chart)
        return chart


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def companion():
    return FakeCompanion()


@pytest.fixture
def viewport():
    return FakeViewport()


@pytest.fixture
def other_viewport():
    return FakeViewport()


@pytest.fixture
def factory():
    return ChartRecorder()


@pytest.fixture
def backend():
    return object()


@pytest.fixture
def controller(scheduler, factory, backend, companion, viewport):
    gate = DependencyGate(scheduler, probe=lambda: backend)
    return PlotController(factory, scheduler, gate=gate, companion=companion, viewport=viewport)


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt5 import QtWidgets
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
