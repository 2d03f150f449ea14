"""Sample mean Monte Carlo integration over [0, 1] with an accumulating-rectangles animation."""

from __future__ import annotations

import logging

from .config import AnimationConfig
from .core.frames import FrameDescriptor, FrameSequence, RectangleRole, RectangleStyle
from .core.layout import LayoutMode
from .core.validator import (
    EmptySequence,
    FunctionEvaluationError,
    InvalidArgument,
    RenderingBackendError,
    SampleMeanError,
)
from .engine import SampleMeanRun, estimate_sample_mean, prepare_sample_mean, render_frames
from .models.results import EstimationResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AnimationConfig",
    "FrameDescriptor",
    "FrameSequence",
    "RectangleRole",
    "RectangleStyle",
    "LayoutMode",
    "EmptySequence",
    "FunctionEvaluationError",
    "InvalidArgument",
    "RenderingBackendError",
    "SampleMeanError",
    "SampleMeanRun",
    "estimate_sample_mean",
    "prepare_sample_mean",
    "render_frames",
    "EstimationResult",
]
