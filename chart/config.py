"""
Engine constants and the typed chart configuration.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict

from chart.formatting import format_ms_compact, format_ms_min_sec, format_tooltip_label

# =============================================================================
# Engine Constants
# =============================================================================

MAX_RETRY_ATTEMPTS = 20       # Gate polls before giving up (~1s total)
RETRY_DELAY_MS = 50           # Delay between gate polls
CHART_ANIMATION = False       # Redraws are instantaneous
SLIDER_WIDTH_BUFFER = 10      # Companion control is this much narrower than the chart [px]
INITIAL_SYNC_DELAY_MS = 100   # Settle pass after the chart is first laid out
FRAME_INTERVAL_MS = 16        # One display refresh at ~60Hz

Y_MIN = 0.0
Y_MAX = 100.0

SERIES_LABEL = "Jaccard Similarity (%)"
FAILED_LABEL = "Failed"

# =============================================================================
# Color Tokens
# =============================================================================

COLORS = {
    "primary": "#4361ee",
    "danger": "#f87171",
    "grid": "#e5e7eb",
    "text": "#4b5563",
    "tooltip_bg": "#1f2937",
    "tooltip_text": "#ffffff",
    "point_face": "#ffffff",
}


@dataclass
class ChartConfig:
    """
    Everything the chart adapter is allowed to know about.

    Axis bounds are per run; the remaining options are presentation only.
    """
    x_min: float
    x_max: float
    y_min: float = Y_MIN
    y_max: float = Y_MAX

    series_label: str = SERIES_LABEL
    failed_label: str = FAILED_LABEL

    tick_formatter: Callable[[float], str] = format_ms_compact
    tooltip_title: Callable[[float], str] = format_ms_min_sec
    tooltip_label: Callable[[str, float], str] = format_tooltip_label

    colors: Dict[str, str] = field(default_factory=lambda: dict(COLORS))
    animation: bool = CHART_ANIMATION

    # Layout
    max_ticks: int = 6
    tick_font_size: int = 7
    tooltip_font_size: int = 8
    line_width: float = 2.0
    point_size: float = 3.0
    failed_marker_size: float = 8.0
