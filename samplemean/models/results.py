"""Result data models for sample-mean integration runs."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.estimator import running_means
from .samples import Sample


class EstimationResult(BaseModel):
    """Samples drawn for one run and the resulting integral estimate."""

    model_config = ConfigDict(frozen=True)

    x: List[float] = Field(..., description="Uniform(0, 1) draws in sampling order")
    y: List[float] = Field(..., description="Integrand values evaluated at x")
    n: int = Field(..., ge=1, description="Number of samples drawn")
    estimate: float = Field(..., description="Sample mean of y, the integral estimate")
    standard_error: Optional[float] = Field(
        None, ge=0.0, description="Standard error of the mean (accuracy diagnostic)"
    )
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_lengths(self) -> "EstimationResult":
        if len(self.x) != self.n or len(self.y) != self.n:
            raise ValueError(
                f"x and y must each hold n={self.n} values "
                f"(got {len(self.x)} and {len(self.y)})"
            )
        return self

    @property
    def samples(self) -> List[Sample]:
        """Ordered :class:`Sample` records, 1-based."""
        return [Sample(index=i + 1, x=xv, y=yv) for i, (xv, yv) in enumerate(zip(self.x, self.y))]

    def to_frame(self) -> pd.DataFrame:
        """Return the samples as a dataframe with a running estimate column."""
        y = np.asarray(self.y, dtype=float)
        return pd.DataFrame(
            {
                "sample": np.arange(1, self.n + 1),
                "x": np.asarray(self.x, dtype=float),
                "y": y,
                "running_mean": running_means(y),
            }
        )

    def summary(self, exact: Optional[float] = None) -> Dict[str, Optional[float]]:
        """Return headline figures, with the error against ``exact`` when known."""
        payload: Dict[str, Optional[float]] = {
            "n": float(self.n),
            "estimate": self.estimate,
            "standard_error": self.standard_error,
            "exact": exact,
            "abs_error": None,
        }
        if exact is not None:
            payload["abs_error"] = abs(self.estimate - exact)
        return payload
