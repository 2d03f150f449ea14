"""Display layout of sample rectangles along the x-axis."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from .sampler import resolve_rng
from .validator import EmptySequence, InvalidArgument


class LayoutMode(str, Enum):
    """How rectangle centers are placed on the x-axis."""

    EXACT = "exact"        # rectangles at the sampled x values
    ADJUSTED = "adjusted"  # side by side, ordered by rank

    @classmethod
    def parse(cls, value: Union["LayoutMode", str, bool]) -> "LayoutMode":
        """Accept enum members, names/values, or a boolean ``adjust`` flag."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ADJUSTED if value else cls.EXACT
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise InvalidArgument(f"Unsupported layout mode: {value!r}")


def anchor_points(n: int) -> np.ndarray:
    """Return ``n`` evenly spaced anchors ``k/(n-1)``; ``[0.0]`` when ``n == 1``."""
    if n < 1:
        raise EmptySequence("At least one anchor point is required")
    return np.linspace(0.0, 1.0, n)


def random_ranks(
    x: Sequence[float],
    rng: Optional[np.random.Generator] = None,
    *,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Return 1-based ranks of ``x`` with ties broken uniformly at random.

    The input is shuffled by a random permutation before a stable sort, so
    equal values end up in random relative order while distinct values keep
    their natural ordering. The ranks are always a permutation of ``1..n``.
    """
    values = np.asarray(x, dtype=float)
    generator = resolve_rng(rng, seed)
    shuffle = generator.permutation(values.size)
    order = shuffle[np.argsort(values[shuffle], kind="stable")]
    ranks = np.empty(values.size, dtype=int)
    ranks[order] = np.arange(1, values.size + 1)
    return ranks


def map_layout(
    x: Sequence[float],
    mode: Union[LayoutMode, str, bool] = LayoutMode.ADJUSTED,
    rng: Optional[np.random.Generator] = None,
    *,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Compute display coordinates ``xx`` for the sampled ``x`` values.

    Parameters
    ----------
    x:
        Sampled points in [0, 1].
    mode:
        ``EXACT`` keeps ``x`` unchanged. ``ADJUSTED`` places the sample of
        rank ``r`` at anchor ``(r - 1)/(n - 1)`` so fixed-width rectangles
        tile the axis without overlapping.
    rng, seed:
        Randomness used to break ties in ``ADJUSTED`` mode.
    """
    layout = LayoutMode.parse(mode)
    values = np.asarray(x, dtype=float)
    if values.ndim != 1:
        raise InvalidArgument("x must be a one-dimensional sequence")
    if values.size == 0:
        raise EmptySequence("Cannot lay out an empty sample")

    if layout is LayoutMode.EXACT:
        xx = values.copy()
    else:
        anchors = anchor_points(values.size)
        xx = anchors[random_ranks(values, rng, seed=seed) - 1]
    xx.setflags(write=False)
    return xx
