"""Rendering collaborators for sample-mean animations."""

from __future__ import annotations

from .convergence_plot import build_convergence_plot
from .frame_animation import PlotlyFrameCollector, build_frame_animation
from .live_renderer import MatplotlibFrameRenderer
from .themes import DARK_THEME, DEFAULT_THEME, LIGHT_THEME, resolve_theme

__all__ = [
    "build_convergence_plot",
    "PlotlyFrameCollector",
    "build_frame_animation",
    "MatplotlibFrameRenderer",
    "DARK_THEME",
    "DEFAULT_THEME",
    "LIGHT_THEME",
    "resolve_theme",
]
