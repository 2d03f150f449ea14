"""Frame sequencing for the accumulating-rectangles animation."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Union

import numpy as np

from .validator import EmptySequence, InvalidArgument


class RectangleRole(str, Enum):
    """Style tag attached to each rectangle of a frame."""

    SETTLED = "settled"
    CURRENT = "current"


class RectangleStyle(NamedTuple):
    """Colours for past rectangles and the rectangle added in the current frame."""

    settled: Any = "gray"
    current: Any = "black"

    @classmethod
    def coerce(cls, value: Union["RectangleStyle", Sequence[Any], None]) -> "RectangleStyle":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, str) or len(value) != 2:
            raise InvalidArgument(
                f"rectangle_style must be a (settled, current) pair, got {value!r}"
            )
        return cls(value[0], value[1])


@dataclass(frozen=True)
class Rectangle:
    """Geometry of one sample's rectangle."""

    index: int  # 1-based sample index
    center: float
    half_width: float
    height: float
    role: RectangleRole

    @property
    def left(self) -> float:
        return self.center - self.half_width

    @property
    def right(self) -> float:
        return self.center + self.half_width

    @property
    def bottom(self) -> float:
        return min(0.0, self.height)

    @property
    def top(self) -> float:
        return max(0.0, self.height)


@dataclass(frozen=True, eq=False)
class FrameDescriptor:
    """
    Everything a renderer needs to draw step ``step`` of the animation.

    Samples ``1..step-1`` are settled and sample ``step`` is current. The
    arrays are shared, read-only views over the whole run; per-frame data is
    obtained by slicing them, so building a frame is O(1).
    """

    step: int
    centers: np.ndarray = field(repr=False)
    heights: np.ndarray = field(repr=False)
    samples_x: np.ndarray = field(repr=False)
    half_width: float
    style: RectangleStyle = RectangleStyle()
    draw_options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def n(self) -> int:
        return int(self.centers.size)

    @property
    def settled(self) -> range:
        return range(1, self.step)

    @property
    def current(self) -> int:
        return self.step

    @property
    def current_x(self) -> float:
        """Raw sampled x of the current sample, used for the highlighted rug tick."""
        return float(self.samples_x[self.step - 1])

    @property
    def is_last(self) -> bool:
        return self.step == self.n

    # ------------------------------------------------------------- geometry
    @property
    def left(self) -> np.ndarray:
        return self.centers[: self.step] - self.half_width

    @property
    def right(self) -> np.ndarray:
        return self.centers[: self.step] + self.half_width

    @property
    def bottom(self) -> np.ndarray:
        return np.minimum(self.heights[: self.step], 0.0)

    @property
    def top(self) -> np.ndarray:
        return np.maximum(self.heights[: self.step], 0.0)

    @property
    def roles(self) -> List[RectangleRole]:
        return [RectangleRole.SETTLED] * (self.step - 1) + [RectangleRole.CURRENT]

    @property
    def colors(self) -> List[Any]:
        return [self.style.settled] * (self.step - 1) + [self.style.current]

    def rectangles(self) -> List[Rectangle]:
        return [
            Rectangle(
                index=k + 1,
                center=float(self.centers[k]),
                half_width=self.half_width,
                height=float(self.heights[k]),
                role=RectangleRole.CURRENT if k + 1 == self.step else RectangleRole.SETTLED,
            )
            for k in range(self.step)
        ]


class FrameSequence:
    """
    Finite, restartable sequence of :class:`FrameDescriptor` objects.

    Every call to ``iter()`` starts again from step 1; frames are created on
    demand, so callers may consume them one at a time under external pacing
    or materialise them with ``list()``.
    """

    def __init__(
        self,
        xx: Sequence[float],
        y: Sequence[float],
        x: Optional[Sequence[float]] = None,
        *,
        style: Union[RectangleStyle, Sequence[Any], None] = None,
        draw_options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        centers = np.array(xx, dtype=float)
        heights = np.array(y, dtype=float)
        raw_x = centers if x is None else np.array(x, dtype=float)
        if centers.ndim != 1 or centers.shape != heights.shape or raw_x.shape != centers.shape:
            raise InvalidArgument("xx, y and x must be one-dimensional and of equal length")
        if centers.size < 1:
            raise EmptySequence("A frame sequence needs at least one sample")
        for arr in (centers, heights, raw_x):
            arr.setflags(write=False)
        self._centers = centers
        self._heights = heights
        self._x = raw_x
        self.half_width = 0.5 / centers.size
        self.style = RectangleStyle.coerce(style)
        self.draw_options: Mapping[str, Any] = MappingProxyType(dict(draw_options or {}))

    def __len__(self) -> int:
        return int(self._centers.size)

    def __iter__(self) -> Iterator[FrameDescriptor]:
        for step in range(1, len(self) + 1):
            yield self.frame(step)

    def __getitem__(self, position: int) -> FrameDescriptor:
        """Zero-based access, like any Python sequence; ``frame()`` is 1-based."""
        try:
            position = operator.index(position)
        except TypeError:
            raise TypeError("FrameSequence indices must be integers") from None
        n = len(self)
        if position < 0:
            position += n
        if not 0 <= position < n:
            raise IndexError("frame index out of range")
        return self.frame(position + 1)

    def with_options(
        self,
        *,
        style: Union[RectangleStyle, Sequence[Any], None] = None,
        draw_options: Optional[Mapping[str, Any]] = None,
    ) -> "FrameSequence":
        """Return a sequence over the same samples with another style or draw options."""
        return FrameSequence(
            self._centers,
            self._heights,
            self._x,
            style=self.style if style is None else style,
            draw_options=self.draw_options if draw_options is None else draw_options,
        )

    def frame(self, step: int) -> FrameDescriptor:
        """Return the descriptor for 1-based ``step``."""
        if not 1 <= step <= len(self):
            raise IndexError(f"step must be in 1..{len(self)}, got {step}")
        return FrameDescriptor(
            step=step,
            centers=self._centers,
            heights=self._heights,
            samples_x=self._x,
            half_width=self.half_width,
            style=self.style,
            draw_options=self.draw_options,
        )
