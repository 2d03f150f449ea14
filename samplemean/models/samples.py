"""Sample data models shared by the sampler, layout and frame modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np


@dataclass(frozen=True)
class Sample:
    """A single uniform draw and the integrand value at that point."""

    index: int  # 1-based
    x: float
    y: float


def _read_only(values: np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=float, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class SampleSet:
    """
    Read-only container for the ``x`` draws and ``y = FUN(x)`` values.

    Both arrays are copied and frozen on construction so that frame
    consumers cannot mutate the values the estimate is computed from.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = _read_only(self.x)
        y = _read_only(self.y)
        if x.ndim != 1 or x.shape != y.shape:
            raise ValueError("x and y must be one-dimensional arrays of equal length")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def n(self) -> int:
        return int(self.x.size)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Sample]:
        for idx in range(self.n):
            yield Sample(index=idx + 1, x=float(self.x[idx]), y=float(self.y[idx]))

    def samples(self) -> List[Sample]:
        """Return the ordered list of :class:`Sample` records."""
        return list(self)


__all__ = ["Sample", "SampleSet"]
