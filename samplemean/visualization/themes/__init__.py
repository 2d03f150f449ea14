"""Animation theme utilities."""

from typing import Dict, Optional

from .dark_theme import DARK_THEME
from .light_theme import LIGHT_THEME

DEFAULT_THEME = LIGHT_THEME

THEME_MAP = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}


def resolve_theme(name: Optional[str]) -> Dict[str, object]:
    if not name:
        return DEFAULT_THEME
    return THEME_MAP.get(name.lower(), DEFAULT_THEME)


__all__ = ["DARK_THEME", "LIGHT_THEME", "DEFAULT_THEME", "THEME_MAP", "resolve_theme"]
