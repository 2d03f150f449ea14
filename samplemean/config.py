"""Animation configuration passed explicitly into each integration run."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional

from .core.validator import InvalidArgument, validate_interval, validate_sample_count

LOGGER = logging.getLogger(__name__)

ENV_NMAX = "SAMPLEMEAN_NMAX"
ENV_INTERVAL = "SAMPLEMEAN_INTERVAL"
ENV_SEED = "SAMPLEMEAN_SEED"
ENV_THEME = "SAMPLEMEAN_THEME"

THEMES = ("light", "dark")


@dataclass(frozen=True)
class AnimationConfig:
    """Frame count, pacing and seed for one animation."""

    nmax: int = 50
    interval: float = 0.2  # seconds between frames
    random_seed: Optional[int] = None
    theme: str = "light"

    def __post_init__(self) -> None:
        validate_sample_count(self.nmax)
        validate_interval(self.interval)
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise InvalidArgument(f"random_seed must be an integer, got {self.random_seed!r}")
        if self.theme not in THEMES:
            raise InvalidArgument(f"Unsupported theme {self.theme!r}; choose from {THEMES}")

    def with_overrides(self, **changes: object) -> "AnimationConfig":
        """Return a copy with the non-``None`` overrides applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    def to_metadata(self) -> Dict[str, object]:
        """Serialise into result metadata."""
        return {
            "nmax": int(self.nmax),
            "interval": float(self.interval),
            "random_seed": self.random_seed,
            "theme": self.theme,
        }

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, object]) -> "AnimationConfig":
        """Rehydrate a configuration from metadata."""
        seed = metadata.get("random_seed")
        return cls(
            nmax=int(metadata.get("nmax", 50)),
            interval=float(metadata.get("interval", 0.2)),
            random_seed=None if seed is None else int(seed),
            theme=str(metadata.get("theme", "light")),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnimationConfig":
        """Build a configuration from ``SAMPLEMEAN_*`` environment variables."""
        env = os.environ if environ is None else environ
        payload: Dict[str, object] = {}
        try:
            if env.get(ENV_NMAX):
                payload["nmax"] = int(env[ENV_NMAX])
            if env.get(ENV_INTERVAL):
                payload["interval"] = float(env[ENV_INTERVAL])
            if env.get(ENV_SEED):
                payload["random_seed"] = int(env[ENV_SEED])
        except ValueError as exc:
            raise InvalidArgument(f"Invalid SAMPLEMEAN_* environment setting: {exc}") from exc
        if env.get(ENV_THEME):
            payload["theme"] = env[ENV_THEME].strip().lower()
        if payload:
            LOGGER.debug("Animation settings from environment: %s", payload)
        return cls.from_metadata(payload)
