"""Light theme for sample-mean animations."""

from __future__ import annotations

from typing import Dict


CURVE_COLOR = "#1F4788"
SETTLED_FILL = "#9E9E9E"
CURRENT_FILL = "#1E1E1E"
ZERO_LINE = "#BDBDBD"
ESTIMATE_COLOR = "#06A77D"
BACKGROUND = "#FAFAFA"
PLOT_BACKGROUND = "#FFFFFF"
TEXT_COLOR = "#1E1E1E"
SUBTEXT_COLOR = "#424242"


LIGHT_THEME: Dict[str, object] = {
    "name": "light",
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
            "xaxis": {"gridcolor": "#E0E0E0", "linecolor": "#BDBDBD", "zeroline": False},
            "yaxis": {"gridcolor": "#E0E0E0", "linecolor": "#BDBDBD", "zeroline": False},
        }
    },
}
