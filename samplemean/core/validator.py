"""Error types and argument validation utilities."""

from __future__ import annotations

import numbers
from typing import Any


class SampleMeanError(Exception):
    """Base error for the sample-mean integration pipeline."""


class InvalidArgument(SampleMeanError, ValueError):
    """Raised when a caller supplies an unusable argument."""


class EmptySequence(InvalidArgument):
    """Raised when a frame sequence or estimate is requested for zero samples."""


class FunctionEvaluationError(InvalidArgument):
    """Raised when the integrand fails on one of the sampled points."""

    def __init__(self, index: int, x: float, message: str) -> None:
        super().__init__(f"Integrand failed on sample {index} (x={x!r}): {message}")
        self.index = index
        self.x = x


class RenderingBackendError(SampleMeanError):
    """Raised when the rendering collaborator fails while drawing a frame."""


def validate_sample_count(n: Any) -> int:
    """Return ``n`` as an ``int`` or raise :class:`InvalidArgument`."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgument(f"Sample count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"Sample count must be >= 1, got {n}")
    return int(n)


def validate_interval(interval: Any) -> float:
    """Ensure the pause interval is a non-negative number of seconds."""
    if isinstance(interval, bool) or not isinstance(interval, numbers.Real):
        raise InvalidArgument(f"Pause interval must be a number, got {interval!r}")
    if interval < 0:
        raise InvalidArgument(f"Pause interval must be >= 0, got {interval}")
    return float(interval)
