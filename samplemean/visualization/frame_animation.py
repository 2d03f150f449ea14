"""Plotly animated figure of the accumulating rectangles."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List, Optional

import numpy as np
import plotly.graph_objects as go

from ..core.estimator import sample_mean
from ..core.frames import FrameDescriptor
from ..core.functions import function_label
from .figure_utils import clip_extent, evaluate_curve, value_limits
from .themes import DEFAULT_THEME

RECT_TRACE = 1
TICK_TRACE = 3


def _bar_trace(frame: FrameDescriptor, y_low: float, y_high: float) -> go.Bar:
    bottom, top = clip_extent(frame.bottom, frame.top, y_low, y_high)
    return go.Bar(
        x=frame.centers[: frame.step],
        y=top - bottom,
        base=bottom,
        width=np.full(frame.step, 2 * frame.half_width),
        marker=dict(color=frame.colors),
        name="Rectangles",
        hovertemplate="x %{x:.3f}<br>f(x) %{y:.4f}<extra></extra>",
        **dict(frame.draw_options),
    )


def _tick_trace(frame: FrameDescriptor, y_top: float, y_span: float) -> go.Scatter:
    return go.Scatter(
        x=[frame.current_x, frame.current_x],
        y=[y_top - 0.04 * y_span, y_top],
        mode="lines",
        line=dict(color=frame.style.current, width=3),
        name="Current sample",
        hoverinfo="skip",
        showlegend=False,
    )


class PlotlyFrameCollector:
    """
    Rendering collaborator that collects frames into an animated Plotly figure.

    ``render_frame`` stores one ``go.Frame`` per step and ``pause`` is a no-op;
    pacing is left to the Play button of the resulting figure, using
    ``interval`` as the frame duration.
    """

    def __init__(
        self,
        fun: Callable[[float], float],
        *,
        label: Optional[str] = None,
        interval: float = 0.2,
        theme: Optional[dict] = None,
        curve_points: int = 201,
    ) -> None:
        self.fun = fun
        self.label = label or function_label(fun)
        self.interval = float(interval)
        self.theme = theme or DEFAULT_THEME
        self.curve_points = curve_points
        self._frames: List[go.Frame] = []
        self._first: Optional[FrameDescriptor] = None
        self._last: Optional[FrameDescriptor] = None
        self._curve: Optional[np.ndarray] = None
        self._y_range: Optional[List[float]] = None

    def _prepare(self, frame: FrameDescriptor) -> None:
        grid = np.linspace(0.0, 1.0, self.curve_points)
        self._curve = evaluate_curve(self.fun, grid)
        self._y_range = list(value_limits(self._curve, frame.heights, pad_ratio=0.08))
        self._first = frame

    def render_frame(self, frame: FrameDescriptor) -> None:
        if self._first is None:
            self._prepare(frame)
        y_low, y_high = self._y_range
        estimate = sample_mean(frame.heights[: frame.step])
        self._frames.append(
            go.Frame(
                data=[_bar_trace(frame, y_low, y_high), _tick_trace(frame, y_high, y_high - y_low)],
                traces=[RECT_TRACE, TICK_TRACE],
                name=str(frame.step),
                layout=dict(title=dict(text=f"n = {frame.step}/{frame.n}   area = {estimate:.5f}")),
            )
        )
        self._last = frame

    def pause(self) -> None:
        return None

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def figure(self) -> go.Figure:
        """Return the animated figure built from the collected frames."""
        if self._first is None or self._last is None:
            raise ValueError("No frames collected; render at least one frame first")
        first = self._first
        y_low, y_high = self._y_range
        palette = self.theme["palette"]
        grid = np.linspace(0.0, 1.0, self.curve_points)

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=grid,
                y=self._curve,
                mode="lines",
                line=dict(color=palette["curve"], width=3),
                name=self.label,
                hovertemplate="x %{x:.3f}<br>f(x) %{y:.4f}<extra></extra>",
            )
        )
        fig.add_trace(_bar_trace(first, y_low, y_high))
        fig.add_trace(
            go.Scatter(
                x=first.samples_x,
                y=np.full(first.n, y_low),
                mode="markers",
                marker=dict(symbol="line-ns-open", size=10, color=self.theme["subtext_color"]),
                name="Samples",
                hoverinfo="skip",
            )
        )
        fig.add_trace(_tick_trace(first, y_high, y_high - y_low))
        fig.frames = self._frames

        duration_ms = int(self.interval * 1000)
        fig.update_layout(
            template=self.theme["plotly_template"],
            title=f"Sample mean Monte Carlo ({self._last.n} samples)",
            xaxis=dict(title="x", range=[-first.half_width, 1.0 + first.half_width]),
            yaxis=dict(title=self.label, range=[y_low, y_high]),
            barmode="overlay",
            bargap=0,
            shapes=[
                dict(
                    type="line",
                    xref="paper",
                    x0=0,
                    x1=1,
                    y0=0,
                    y1=0,
                    line=dict(color=palette["zero_line"], width=1),
                )
            ],
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
            updatemenus=[
                dict(
                    type="buttons",
                    showactive=False,
                    buttons=[
                        dict(
                            label="Play",
                            method="animate",
                            args=[
                                None,
                                {"frame": {"duration": duration_ms, "redraw": True}, "fromcurrent": True},
                            ],
                        ),
                        dict(
                            label="Pause",
                            method="animate",
                            args=[
                                [None],
                                {"frame": {"duration": 0}, "mode": "immediate", "transition": {"duration": 0}},
                            ],
                        ),
                    ],
                )
            ],
            sliders=[
                dict(
                    steps=[
                        dict(method="animate", args=[[frame.name]], label=frame.name)
                        for frame in self._frames
                    ],
                    transition=dict(duration=0),
                    currentvalue=dict(prefix="n = "),
                    x=0.05,
                    len=0.9,
                )
            ],
            margin=dict(l=60, r=20, t=80, b=50),
        )
        return fig

    def write_html(self, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.figure().write_html(output_path, include_plotlyjs="cdn")
        return output_path


def build_frame_animation(
    frames,
    fun: Callable[[float], float],
    **kwargs: Any,
) -> go.Figure:
    """Collect every frame of ``frames`` and return the animated figure."""
    collector = PlotlyFrameCollector(fun, **kwargs)
    for frame in frames:
        collector.render_frame(frame)
    return collector.figure()

