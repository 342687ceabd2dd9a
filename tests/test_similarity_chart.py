import numpy as np
import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from chart.config import ChartConfig
from chart.failures import FailureOverlay
from chart.series import SeriesStore
from ui.canvases import SimilarityChart


@pytest.fixture
def stores():
    return SeriesStore(), FailureOverlay()


@pytest.fixture
def chart(stores):
    figure = Figure(figsize=(6, 2), dpi=100)
    FigureCanvasAgg(figure)
    series, failures = stores
    return SimilarityChart(figure, ChartConfig(x_min=0, x_max=300_000), series, failures)


def test_axis_bounds_follow_config(chart):
    assert chart.ax.get_xlim() == (0, 300_000)
    assert chart.ax.get_ylim() == (0, 100)


def test_tick_labels_use_compact_format(chart):
    formatter = chart.ax.xaxis.get_major_formatter()
    assert formatter(150_000, 0) == "2:30"


def test_datasets_share_the_stores(chart, stores):
    series, failures = stores
    assert chart.data.datasets[0].data is series.samples
    assert chart.data.datasets[1].data is failures.markers
    assert chart.data.datasets[1].label == "Failed"


def test_update_pushes_store_contents(chart, stores):
    series, failures = stores
    series.upsert(120_000, 73.5)
    series.upsert(60_000, 79.2)
    failures.mark(150_000)
    chart.update()

    np.testing.assert_array_equal(chart.line.get_xdata(), [60_000, 120_000])
    np.testing.assert_array_equal(chart.line.get_ydata(), [79.2, 73.5])
    np.testing.assert_array_equal(chart.failed_line.get_xdata(), [150_000])
    np.testing.assert_array_equal(chart.failed_line.get_ydata(), [0])


def test_tooltip_text(chart, stores):
    series, failures = stores
    series.upsert(150_000, 73.46)
    failures.mark(30_000)

    assert chart.tooltip_text(0, 0) == "2m 30s\nJaccard Similarity (%): 73.5%"
    assert chart.tooltip_text(1, 0) == "0m 30s\nFailed"


def test_rendered_width_is_canvas_width(chart):
    assert chart.rendered_width() == 600


def test_destroy_clears_figure_and_runs_hook(stores):
    figure = Figure(figsize=(6, 2), dpi=100)
    FigureCanvasAgg(figure)
    dropped = []
    series, failures = stores
    chart = SimilarityChart(figure, ChartConfig(x_min=0, x_max=10), series, failures,
                            on_destroy=lambda: dropped.append(True))

    chart.destroy()
    chart.destroy()
    chart.update()

    assert figure.axes == []
    assert dropped == [True]
