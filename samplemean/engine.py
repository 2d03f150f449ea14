"""High-level orchestration for sample-mean Monte Carlo integration."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence, Union

import numpy as np

from .config import AnimationConfig
from .core.estimator import sample_mean, standard_error
from .core.frames import FrameDescriptor, FrameSequence, RectangleStyle
from .core.functions import function_label, parabola
from .core.layout import LayoutMode, map_layout
from .core.sampler import draw_samples, resolve_rng
from .core.validator import RenderingBackendError, validate_sample_count
from .models.results import EstimationResult
from .models.samples import SampleSet

LOGGER = logging.getLogger(__name__)


class FrameRenderer(Protocol):
    """Rendering collaborator: draws one frame, then waits before the next."""

    def render_frame(self, frame: FrameDescriptor) -> None:
        ...

    def pause(self) -> None:
        ...


@dataclass(frozen=True, eq=False)
class SampleMeanRun:
    """Everything computed for one run, before any frame is rendered."""

    samples: SampleSet
    display_x: np.ndarray
    frames: FrameSequence
    result: EstimationResult
    layout_mode: LayoutMode
    label: str


def prepare_sample_mean(
    fun: Callable[[float], float] = parabola,
    n: Optional[int] = None,
    layout_mode: Union[LayoutMode, str, bool] = LayoutMode.ADJUSTED,
    rectangle_style: Union[RectangleStyle, Sequence[Any], None] = ("gray", "black"),
    *,
    config: Optional[AnimationConfig] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    **draw_options: Any,
) -> SampleMeanRun:
    """
    Draw samples, lay them out and compute the estimate without rendering.

    The returned run holds a restartable :class:`FrameSequence`; callers can
    iterate it eagerly or one frame at a time under their own pacing. The
    estimate does not depend on how many frames are consumed.
    """
    config = config or AnimationConfig()
    n = validate_sample_count(config.nmax if n is None else n)
    mode = LayoutMode.parse(layout_mode)
    style = RectangleStyle.coerce(rectangle_style)
    if seed is None and rng is None:
        seed = config.random_seed
    generator = resolve_rng(rng, seed)

    samples = draw_samples(fun, n, generator)
    spread = standard_error(samples.y)
    display_x = map_layout(samples.x, mode, generator)
    frames = FrameSequence(
        display_x,
        samples.y,
        samples.x,
        style=style,
        draw_options=draw_options,
    )
    result = EstimationResult(
        x=samples.x.tolist(),
        y=samples.y.tolist(),
        n=n,
        estimate=sample_mean(samples.y),
        standard_error=spread if math.isfinite(spread) else None,
        metadata={"layout_mode": mode.value, **config.to_metadata()},
    )
    LOGGER.info(
        "Sample-mean estimate from %d samples (%s layout): %.6f",
        n,
        mode.value,
        result.estimate,
    )
    return SampleMeanRun(
        samples=samples,
        display_x=display_x,
        frames=frames,
        result=result,
        layout_mode=mode,
        label=function_label(fun),
    )


def render_frames(frames: FrameSequence, renderer: FrameRenderer) -> int:
    """
    Hand every frame to ``renderer`` in order, pausing after each one.

    Renderer failures are re-raised as :class:`RenderingBackendError` without
    retrying. Returns the number of frames rendered.
    """
    rendered = 0
    for frame in frames:
        try:
            renderer.render_frame(frame)
            renderer.pause()
        except Exception as exc:
            raise RenderingBackendError(
                f"Renderer failed on frame {frame.step}/{len(frames)}: {exc}"
            ) from exc
        rendered += 1
        LOGGER.debug("Rendered frame %d/%d", frame.step, len(frames))
    return rendered


def estimate_sample_mean(
    fun: Callable[[float], float] = parabola,
    n: Optional[int] = None,
    layout_mode: Union[LayoutMode, str, bool] = LayoutMode.ADJUSTED,
    rectangle_style: Union[RectangleStyle, Sequence[Any], None] = ("gray", "black"),
    *,
    renderer: Optional[FrameRenderer] = None,
    config: Optional[AnimationConfig] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    **draw_options: Any,
) -> EstimationResult:
    """
    Integrate ``fun`` over [0, 1] by the sample-mean Monte Carlo method.

    Parameters
    ----------
    fun:
        Scalar integrand; defaults to ``x - x^2``.
    n:
        Number of uniform draws; defaults to ``config.nmax``.
    layout_mode:
        ``ADJUSTED`` lays rectangles side by side in rank order, ``EXACT``
        centres them on the sampled points. Booleans are accepted.
    rectangle_style:
        ``(settled, current)`` colours forwarded to the renderer in each frame.
    renderer:
        Object with ``render_frame(frame)`` and ``pause()``. When omitted no
        frames are rendered.
    config:
        Explicit animation configuration (frame count, interval, seed).
    rng, seed:
        Randomness for sampling and layout tie-breaking. Passing both is an
        error; ``config.random_seed`` applies when neither is given.
    draw_options:
        Passed through untouched to the renderer's rectangle primitive.
    """
    run = prepare_sample_mean(
        fun,
        n,
        layout_mode,
        rectangle_style,
        config=config,
        rng=rng,
        seed=seed,
        **draw_options,
    )
    if renderer is not None:
        render_frames(run.frames, renderer)
    return run.result
