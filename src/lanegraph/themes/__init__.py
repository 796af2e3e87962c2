"""Theme definitions for lane diagrams."""

from lanegraph.themes.classic import CLASSIC_THEME
from lanegraph.themes.light import LIGHT_THEME

THEMES = {
    "classic": CLASSIC_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "CLASSIC_THEME", "LIGHT_THEME"]
