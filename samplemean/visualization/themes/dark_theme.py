"""Dark theme for sample-mean animations."""

from __future__ import annotations

from typing import Dict


CURVE_COLOR = "#00D9FF"
SETTLED_FILL = "#616161"
CURRENT_FILL = "#FFFFFF"
ZERO_LINE = "#555555"
ESTIMATE_COLOR = "#4CAF50"
BACKGROUND = "#1E1E1E"
PLOT_BACKGROUND = "#2C2C2C"
TEXT_COLOR = "#FFFFFF"
SUBTEXT_COLOR = "#BDBDBD"


DARK_THEME: Dict[str, object] = {
    "name": "dark",
    "background_color": BACKGROUND,
    "text_color": TEXT_COLOR,
    "subtext_color": SUBTEXT_COLOR,
    "palette": {
        "curve": CURVE_COLOR,
        "settled": SETTLED_FILL,
        "current": CURRENT_FILL,
        "zero_line": ZERO_LINE,
        "estimate": ESTIMATE_COLOR,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Roboto, Open Sans, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": PLOT_BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "xaxis": {"gridcolor": "#424242", "linecolor": "#555555", "zeroline": False},
            "yaxis": {"gridcolor": "#424242", "linecolor": "#555555", "zeroline": False},
        }
    },
}
