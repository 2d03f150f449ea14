"""Convergence plot of the running sample-mean estimate."""

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from ..core.estimator import running_standard_errors
from ..models.results import EstimationResult
from .themes import DEFAULT_THEME


def build_convergence_plot(
    result: EstimationResult,
    *,
    exact: Optional[float] = None,
    theme: Optional[dict] = None,
) -> go.Figure:
    """
    Build the running estimate against the number of samples drawn.

    A ±2 standard-error band around the running mean shows the O(1/√n)
    shrinkage of the Monte Carlo error; ``exact`` adds a reference line.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    df = result.to_frame()
    counts = df["sample"].to_numpy()
    running = df["running_mean"].to_numpy()
    band = 2.0 * running_standard_errors(df["y"].to_numpy())

    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=np.concatenate([counts, counts[::-1]]),
            y=np.concatenate([running + band, (running - band)[::-1]]),
            fill="toself",
            fillcolor="rgba(158,158,158,0.25)",
            line=dict(color="rgba(0,0,0,0)"),
            name="±2 s.e.",
            hoverinfo="skip",
        )
    )
    figure.add_trace(
        go.Scatter(
            x=counts,
            y=running,
            mode="lines",
            line=dict(color=palette["estimate"], width=3),
            name="Running estimate",
            hovertemplate="Samples %{x}<br>Estimate %{y:.5f}<extra></extra>",
        )
    )
    if exact is not None:
        figure.add_hline(
            y=exact,
            line=dict(color=palette["curve"], width=2, dash="dash"),
            annotation_text=f"exact = {exact:.5f}",
        )

    figure.update_layout(
        template=theme["plotly_template"],
        title="Convergence of the sample-mean estimate",
        margin=dict(l=60, r=30, t=60, b=40),
        xaxis=dict(title="Samples drawn"),
        yaxis=dict(title="Estimate"),
        hovermode="x unified",
    )
    return figure
