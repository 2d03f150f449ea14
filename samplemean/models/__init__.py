"""Data models for samples and estimation results."""

from .results import EstimationResult
from .samples import Sample, SampleSet

__all__ = ["EstimationResult", "Sample", "SampleSet"]
