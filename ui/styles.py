"""
Styling constants and theme configuration for the dashboard UI.
"""
from chart.config import COLORS

# =============================================================================
# Color Palette
# =============================================================================

BG_COLOR = "#f9fafb"          # Main background
BG_COLOR_PANEL = "#ffffff"    # Panels, inputs
TEXT_COLOR = "#1f2937"        # Main text
TEXT_COLOR_DIM = COLORS["text"]
BORDER_COLOR = "#d1d5db"

ACCENT_PRIMARY = COLORS["primary"]
ACCENT_DANGER = COLORS["danger"]

# Status banner levels
STATUS_INFO = TEXT_COLOR_DIM
STATUS_ERROR = "#dc2626"

FONT_FAMILY = "Inter, sans-serif"

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

LIGHT_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
        font-family: {FONT_FAMILY};
    }}
    QGroupBox {{
        background-color: {BG_COLOR_PANEL};
        border: 1px solid {BORDER_COLOR};
        border-radius: 6px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QLineEdit, QSpinBox {{
        background-color: {BG_COLOR_PANEL};
        color: {TEXT_COLOR};
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        padding: 3px;
    }}
    QPushButton {{
        background-color: {ACCENT_PRIMARY};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #3651d4;
    }}
    QPushButton:pressed {{
        background-color: #2b44bd;
    }}
    QSlider::groove:horizontal {{
        height: 4px;
        background: {BORDER_COLOR};
        border-radius: 2px;
    }}
    QSlider::handle:horizontal {{
        background: {ACCENT_PRIMARY};
        width: 14px;
        margin: -6px 0;
        border-radius: 7px;
    }}
"""
