"""Matplotlib renderer drawing the accumulating rectangles frame by frame."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from ..core.estimator import sample_mean
from ..core.frames import FrameDescriptor
from ..core.functions import function_label
from .figure_utils import clip_extent, evaluate_curve, value_limits
from .themes import DEFAULT_THEME

LOGGER = logging.getLogger(__name__)

RUG_LENGTH = 0.03  # fraction of the axes height


class MatplotlibFrameRenderer:
    """
    Live rectangle animation on a matplotlib axes.

    The integrand curve, zero line and the rug of all sampled points are
    static and drawn once, on the first frame. Each subsequent frame only
    replaces the rectangles, the highlighted rug tick and the title.

    Parameters
    ----------
    fun:
        Integrand, drawn as a curve over [0, 1].
    label:
        Y-axis label; derived from ``fun`` when omitted.
    interval:
        Seconds to wait in :meth:`pause` when the figure is shown.
    show:
        Display the figure interactively. When ``False`` ``pause`` does not
        block, which suits headless export.
    record:
        Keep an RGB snapshot of every frame for :meth:`save_gif`.
    rectangle_kwargs:
        Renderer-level defaults merged under each frame's draw options.
    """

    def __init__(
        self,
        fun: Callable[[float], float],
        *,
        label: Optional[str] = None,
        interval: float = 0.2,
        theme: Optional[dict] = None,
        ax: Optional[plt.Axes] = None,
        show: bool = True,
        record: bool = False,
        curve_points: int = 201,
        rectangle_kwargs: Optional[dict] = None,
    ) -> None:
        self.fun = fun
        self.label = label or function_label(fun)
        self.interval = float(interval)
        self.theme = theme or DEFAULT_THEME
        self.show = show
        self.record = record
        self.curve_points = curve_points
        self.rectangle_kwargs = dict(rectangle_kwargs or {})
        if ax is None:
            self.figure, self.ax = plt.subplots(figsize=(7, 5))
        else:
            self.figure, self.ax = ax.figure, ax
        self.snapshots: List[np.ndarray] = []
        self._initialised = False
        self._bars = None
        self._current_tick = None
        self._y_limits = (0.0, 1.0)

    # ---------------------------------------------------------------- static
    def _draw_background(self, frame: FrameDescriptor) -> None:
        palette = self.theme["palette"]
        grid = np.linspace(0.0, 1.0, self.curve_points)
        curve = evaluate_curve(self.fun, grid)

        self.ax.plot(grid, curve, color=palette["curve"], linewidth=2, zorder=3)
        self.ax.axhline(0.0, color=palette["zero_line"], linewidth=1, zorder=1)
        self.ax.vlines(
            frame.samples_x,
            0.0,
            RUG_LENGTH,
            transform=self.ax.get_xaxis_transform(),
            colors=self.theme["subtext_color"],
            linewidth=0.8,
        )

        self._y_limits = value_limits(curve, frame.heights)
        self.ax.set_xlim(-frame.half_width, 1.0 + frame.half_width)
        self.ax.set_ylim(*self._y_limits)
        self.ax.set_xlabel("x")
        self.ax.set_ylabel(self.label)
        self._initialised = True

    # --------------------------------------------------------------- dynamic
    def render_frame(self, frame: FrameDescriptor) -> None:
        if not self._initialised:
            self._draw_background(frame)
        if self._bars is not None:
            self._bars.remove()
        if self._current_tick is not None:
            self._current_tick.remove()

        options = {**self.rectangle_kwargs, **frame.draw_options}
        bottom, top = clip_extent(frame.bottom, frame.top, *self._y_limits)
        self._bars = self.ax.bar(
            frame.left,
            top - bottom,
            width=2 * frame.half_width,
            bottom=bottom,
            align="edge",
            color=frame.colors,
            zorder=2,
            **options,
        )
        self._current_tick = self.ax.vlines(
            [frame.current_x],
            1.0 - RUG_LENGTH,
            1.0,
            transform=self.ax.get_xaxis_transform(),
            colors=[frame.style.current],
            linewidth=2,
        )
        estimate = sample_mean(frame.heights[: frame.step])
        self.ax.set_title(f"n = {frame.step}/{frame.n}   area = {estimate:.5f}")

        if self.record:
            self.figure.canvas.draw()
            rgba = np.asarray(self.figure.canvas.buffer_rgba())
            self.snapshots.append(rgba[..., :3].copy())

    def pause(self) -> None:
        if self.show:
            plt.pause(self.interval)

    # ---------------------------------------------------------------- export
    def save_gif(self, output_path: Path, fps: Optional[float] = None) -> Optional[Path]:
        """Write the recorded frames as an animated GIF."""
        if not self.snapshots:
            LOGGER.warning("No recorded frames; enable record=True before rendering.")
            return None
        import imageio.v2 as imageio

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if fps is None:
            fps = 1.0 / self.interval if self.interval > 0 else 12
        imageio.mimsave(output_path, self.snapshots, fps=fps)
        return output_path

    def close(self) -> None:
        plt.close(self.figure)
