"""Sample-mean estimate of the integral and its accuracy diagnostics.

For X ~ Uniform(0, 1), E[FUN(X)] equals the integral of FUN over [0, 1], so
the arithmetic mean of the sampled function values is an unbiased and
consistent estimate of it. Its variance shrinks as O(1/n); with small ``n``
the estimate can be far from the true value.
"""

from __future__ import annotations

from math import sqrt
from typing import Sequence

import numpy as np

from .validator import EmptySequence


def _as_array(y: Sequence[float]) -> np.ndarray:
    arr = np.asarray(y, dtype=float)
    if arr.size == 0:
        raise EmptySequence("Cannot estimate an integral from zero samples")
    return arr.ravel()


def sample_mean(y: Sequence[float]) -> float:
    """Return the arithmetic mean of the function values."""
    return float(np.mean(_as_array(y)))


def running_means(y: Sequence[float]) -> np.ndarray:
    """Return the estimate after each successive sample."""
    arr = _as_array(y)
    return np.cumsum(arr) / np.arange(1, arr.size + 1)


def standard_error(y: Sequence[float]) -> float:
    """Standard error of the mean; zero for a single sample."""
    arr = _as_array(y)
    if arr.size == 1:
        return 0.0
    return float(arr.std(ddof=1) / sqrt(arr.size))


def running_standard_errors(y: Sequence[float]) -> np.ndarray:
    """
    Standard error of the running estimate after each successive sample.

    Uses Welford's update so the variance stays accurate when the values sit
    far from zero; the first entry is zero, as for :func:`standard_error`.
    """
    arr = _as_array(y)
    errors = np.zeros(arr.size)
    mean = 0.0
    sq_dev = 0.0
    for idx, value in enumerate(arr):
        count = idx + 1
        delta = value - mean
        mean += delta / count
        sq_dev += delta * (value - mean)
        if count > 1:
            errors[idx] = sqrt(max(sq_dev, 0.0) / (count - 1) / count)
    return errors
