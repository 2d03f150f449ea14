"""Uniform sample generation and integrand evaluation."""

from __future__ import annotations

import math
import numbers
from typing import Callable, Optional

import numpy as np

from ..models.samples import SampleSet
from .validator import FunctionEvaluationError, InvalidArgument, validate_sample_count

Integrand = Callable[[float], float]


def resolve_rng(
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.random.Generator:
    """Return ``rng`` when supplied, otherwise a fresh generator seeded with ``seed``."""
    if rng is not None:
        if seed is not None:
            raise InvalidArgument("Pass either rng or seed, not both")
        return rng
    return np.random.default_rng(seed)


def _evaluate(fun: Integrand, index: int, x: float) -> float:
    try:
        value = fun(x)
    except Exception as exc:
        raise FunctionEvaluationError(index, x, f"{type(exc).__name__}: {exc}") from exc
    if isinstance(value, np.ndarray) and value.size == 1:
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise FunctionEvaluationError(index, x, f"expected a real number, got {value!r}")
    value = float(value)
    if math.isnan(value):
        raise FunctionEvaluationError(index, x, "integrand returned NaN")
    return value


def draw_samples(
    fun: Integrand,
    n: int,
    rng: Optional[np.random.Generator] = None,
    *,
    seed: Optional[int] = None,
) -> SampleSet:
    """
    Draw ``n`` Uniform(0, 1) points and evaluate ``fun`` at each of them.

    Parameters
    ----------
    fun:
        Scalar integrand ``float -> float``.
    n:
        Number of draws, must be >= 1. Checked before any randomness is used.
    rng:
        Source of uniform draws. A new ``default_rng(seed)`` is used when omitted.
    seed:
        Seed for the generator created when ``rng`` is not supplied.
    """
    n = validate_sample_count(n)
    generator = resolve_rng(rng, seed)
    x = generator.random(n)
    y = np.empty(n, dtype=float)
    for idx in range(n):
        y[idx] = _evaluate(fun, idx + 1, float(x[idx]))
    return SampleSet(x=x, y=y)
