"""Sampling, layout, frame sequencing and estimation for sample-mean Monte Carlo."""

from .estimator import running_means, running_standard_errors, sample_mean, standard_error
from .frames import FrameDescriptor, FrameSequence, Rectangle, RectangleRole, RectangleStyle
from .functions import INTEGRANDS, NamedIntegrand, get_integrand, parabola
from .layout import LayoutMode, anchor_points, map_layout, random_ranks
from .sampler import draw_samples, resolve_rng
from .validator import (
    EmptySequence,
    FunctionEvaluationError,
    InvalidArgument,
    RenderingBackendError,
    SampleMeanError,
)

__all__ = [
    "running_means",
    "running_standard_errors",
    "sample_mean",
    "standard_error",
    "FrameDescriptor",
    "FrameSequence",
    "Rectangle",
    "RectangleRole",
    "RectangleStyle",
    "INTEGRANDS",
    "NamedIntegrand",
    "get_integrand",
    "parabola",
    "LayoutMode",
    "anchor_points",
    "map_layout",
    "random_ranks",
    "draw_samples",
    "resolve_rng",
    "EmptySequence",
    "FunctionEvaluationError",
    "InvalidArgument",
    "RenderingBackendError",
    "SampleMeanError",
]
