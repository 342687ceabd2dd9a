"""
Similarity chart: matplotlib adapter driven by the plot controller.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from chart.config import ChartConfig
from chart.failures import FailureOverlay
from chart.series import SeriesStore


@dataclass
class Dataset:
    label: str
    kind: str      # "line" or "scatter"
    data: list     # the live store list, mutated in place by the engine


@dataclass
class ChartData:
    datasets: List[Dataset]


class SimilarityChart:
    """
    Line of similarity samples plus a scatter overlay of failed positions.

    The chart draws whatever the stores hold at the time ``update()`` is called;
    it never copies or reorders them.
    """

    def __init__(self, figure, config: ChartConfig, series: SeriesStore,
                 failures: FailureOverlay, on_destroy: Optional[Callable[[], None]] = None):
        """
        Build the axes on ``figure``.

        Args:
            figure: matplotlib Figure attached to a canvas (the drawing surface)
            config: Axis bounds, formatters and colors
            series: Store backing the similarity line
            failures: Store backing the failure overlay
            on_destroy: Called after the figure is cleared, e.g. to drop the widget
        """
        self.figure = figure
        self.config = config
        self.series = series
        self.failures = failures
        self.on_destroy = on_destroy
        self.destroyed = False

        self.data = ChartData(datasets=[
            Dataset(config.series_label, "line", series.samples),
            Dataset(config.failed_label, "scatter", failures.markers),
        ])

        colors = config.colors
        self.ax = self.figure.add_subplot(111)

        # Style axes
        for spine in self.ax.spines.values():
            spine.set_visible(False)
        self.ax.tick_params(colors=colors["text"], labelsize=config.tick_font_size, length=0)
        self.ax.get_yaxis().set_visible(False)
        self.ax.grid(True, axis="x", color=colors["grid"])
        self.ax.set_axisbelow(True)

        # Configure axes
        self.ax.set_xlim(config.x_min, config.x_max)
        self.ax.set_ylim(config.y_min, config.y_max)
        self.ax.xaxis.set_major_formatter(lambda value, _pos: config.tick_formatter(value))
        self.ax.locator_params(axis="x", nbins=config.max_ticks)

        # Similarity line
        self.line, = self.ax.plot(
            [], [],
            color=colors["primary"],
            linewidth=config.line_width,
            marker="o",
            markersize=config.point_size * 2,
            markerfacecolor=colors["point_face"],
            markeredgecolor=colors["primary"],
            markeredgewidth=config.line_width,
            label=config.series_label,
        )

        # Failed targets overlay
        self.failed_line, = self.ax.plot(
            [], [],
            linestyle="none",
            marker="x",
            markersize=config.failed_marker_size,
            markeredgewidth=2,
            color=colors["danger"],
            clip_on=False,
            label=config.failed_label,
        )

        # Hover tooltip
        self.tooltip = self.ax.annotate(
            "",
            xy=(0, 0),
            xytext=(10, 10),
            textcoords="offset points",
            fontsize=config.tooltip_font_size,
            color=colors["tooltip_text"],
            bbox=dict(boxstyle="round,pad=0.5", fc=colors["tooltip_bg"], ec="none", alpha=0.8),
        )
        self.tooltip.set_visible(False)

        self._hover_cid = self.figure.canvas.mpl_connect("motion_notify_event", self._on_hover)

        self.figure.tight_layout(pad=0.5)

    def update(self):
        """Push the current store contents to the artists and redraw."""
        if self.destroyed:
            return

        xs = np.array(self.series.positions(), dtype=float)
        ys = np.array(self.series.values(), dtype=float)
        self.line.set_data(xs, ys)

        fx = np.array(self.failures.positions(), dtype=float)
        self.failed_line.set_data(fx, np.zeros_like(fx))

        if self.config.animation:
            self.figure.canvas.draw_idle()
        else:
            self.figure.canvas.draw()

    def destroy(self):
        """Release the axes and event hooks. The chart is unusable afterwards."""
        if self.destroyed:
            return
        self.destroyed = True
        self.figure.canvas.mpl_disconnect(self._hover_cid)
        self.figure.clear()
        if self.on_destroy is not None:
            self.on_destroy()

    def rendered_width(self) -> float:
        return self.figure.canvas.get_width_height()[0]

    def tooltip_text(self, dataset_index: int, point_index: int) -> str:
        """Tooltip for one point: 'Mm Ss' title line, then the value line."""
        dataset = self.data.datasets[dataset_index]
        point = dataset.data[point_index]
        title = self.config.tooltip_title(point.position)
        if dataset.kind == "scatter":
            return f"{title}\n{dataset.label}"
        return f"{title}\n{self.config.tooltip_label(dataset.label, point.value)}"

    def _on_hover(self, event):
        if self.destroyed or event.inaxes is not self.ax:
            return

        for dataset_index, artist in enumerate((self.line, self.failed_line)):
            contains, info = artist.contains(event)
            if contains and len(info.get("ind", [])) > 0:
                point_index = int(info["ind"][0])
                x, y = artist.get_xdata()[point_index], artist.get_ydata()[point_index]
                self.tooltip.xy = (x, y)
                self.tooltip.set_text(self.tooltip_text(dataset_index, point_index))
                self.tooltip.set_visible(True)
                self.figure.canvas.draw_idle()
                return

        if self.tooltip.get_visible():
            self.tooltip.set_visible(False)
            self.figure.canvas.draw_idle()
