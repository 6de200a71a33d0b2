"""
Styling constants and theme configuration for the dashboard UI.
"""

# =============================================================================
# Color Palette
# =============================================================================

BG_COLOR = "#0f1115"          # Main background
BG_SIDEBAR = "#0c0e12"        # Sidebar background
CARD_COLOR = "#181b22"        # Cards, panels, chart axes
STROKE_COLOR = "#20232b"      # Borders, axis spines
TEXT_COLOR = "#e6e8ef"        # Main text
TEXT_COLOR_MUTED = "#a2a7b4"  # Subtitles, tick labels

ACCENT = "#5b62ff"            # Observed area
PROJECTED_COLOR = "#8a909f"   # Projected tail line
OK_COLOR = "#34d399"          # Update log check marks

# Observed area fill opacity
AREA_ALPHA = 0.55

# =============================================================================
# Matplotlib Theme
# =============================================================================

MATPLOTLIB_DARK_THEME = {
    "figure.facecolor": CARD_COLOR,
    "axes.facecolor": CARD_COLOR,
    "axes.edgecolor": STROKE_COLOR,
    "axes.labelcolor": TEXT_COLOR_MUTED,
    "axes.titlecolor": TEXT_COLOR,
    "xtick.color": TEXT_COLOR_MUTED,
    "ytick.color": TEXT_COLOR_MUTED,
    "grid.color": STROKE_COLOR,
    "grid.alpha": 0.6,
    "text.color": TEXT_COLOR,
}

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow, QWidget#central {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QFrame#sidebar {{
        background-color: {BG_SIDEBAR};
        border-right: 1px solid {STROKE_COLOR};
    }}
    QFrame#card {{
        background-color: {CARD_COLOR};
        border: 1px solid {STROKE_COLOR};
        border-radius: 12px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QLabel#muted {{
        color: {TEXT_COLOR_MUTED};
        font-size: 9pt;
    }}
    QLabel#cardValue {{
        font-size: 16pt;
        font-weight: bold;
    }}
    QLabel#brand {{
        font-weight: 800;
        letter-spacing: 2px;
    }}
    QLineEdit {{
        background-color: {CARD_COLOR};
        color: {TEXT_COLOR};
        border: 1px solid {STROKE_COLOR};
        border-radius: 8px;
        padding: 6px;
    }}
    QListWidget {{
        background-color: {CARD_COLOR};
        color: {TEXT_COLOR};
        border: none;
    }}
    QPushButton#navItem {{
        background-color: transparent;
        color: {TEXT_COLOR};
        border: none;
        border-radius: 8px;
        padding: 8px 12px;
        text-align: left;
    }}
    QPushButton#navItem:hover {{
        background-color: {CARD_COLOR};
    }}
"""
