"""Shared helpers for the background curve and axis limits of both renderers."""

from __future__ import annotations

import logging
from typing import Callable, Tuple

import numpy as np

LOGGER = logging.getLogger(__name__)


def evaluate_curve(fun: Callable[[float], float], grid: np.ndarray) -> np.ndarray:
    """
    Evaluate ``fun`` on ``grid`` for plotting.

    Points where ``fun`` raises, or returns something that is not a finite
    number, become NaN so the curve shows a gap there. ``math.log`` at 0 or
    ``1 / sqrt(x)`` at 0 are valid integrands whose curve is simply undefined
    at the endpoint.
    """
    curve = np.full(len(grid), np.nan)
    failed = 0
    with np.errstate(all="ignore"):
        for idx, value in enumerate(grid):
            try:
                curve[idx] = float(fun(float(value)))
            except (ArithmeticError, ValueError, TypeError):
                failed += 1
    curve[~np.isfinite(curve)] = np.nan
    if failed:
        LOGGER.debug("Integrand undefined at %d of %d curve points", failed, len(grid))
    return curve


def value_limits(
    curve: np.ndarray,
    heights: np.ndarray,
    *,
    pad_ratio: float = 0.05,
) -> Tuple[float, float]:
    """Return padded y-limits covering zero and every finite curve value and height."""
    values = np.concatenate([np.ravel(curve), np.ravel(heights), [0.0]]).astype(float)
    values = values[np.isfinite(values)]
    low = float(values.min())
    high = float(values.max())
    pad = max(high - low, 1e-6) * pad_ratio
    return low - pad, high + pad


def clip_extent(
    bottom: np.ndarray,
    top: np.ndarray,
    low: float,
    high: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Clip rectangle extents to ``[low, high]`` so infinite heights reach the axis edge."""
    return np.clip(bottom, low, high), np.clip(top, low, high)
