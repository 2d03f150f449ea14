"""Named integrands with known integrals over [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, exp, pi, sin
from typing import Callable, Dict, List

from .validator import InvalidArgument


def parabola(x: float) -> float:
    """Default integrand ``x - x^2``; its integral over [0, 1] is 1/6."""
    return x - x ** 2


def shifted_cubic(x: float) -> float:
    return x ** 3 - 0.5 ** 3


@dataclass(frozen=True)
class NamedIntegrand:
    """An integrand, its axis label and its exact integral over [0, 1]."""

    name: str
    function: Callable[[float], float]
    label: str
    exact: float

    def __call__(self, x: float) -> float:
        return self.function(x)


INTEGRANDS: Dict[str, NamedIntegrand] = {
    "parabola": NamedIntegrand("parabola", parabola, "y = x - x^2", 1.0 / 6.0),
    "cubic": NamedIntegrand("cubic", shifted_cubic, "y = x^3 - 0.5^3", 0.25 - 0.125),
    "sine": NamedIntegrand("sine", lambda x: sin(pi * x), "y = sin(pi x)", 2.0 / pi),
    "cosine": NamedIntegrand("cosine", lambda x: cos(2 * pi * x), "y = cos(2 pi x)", 0.0),
    "exp": NamedIntegrand("exp", exp, "y = exp(x)", exp(1.0) - 1.0),
}


def get_integrand(name: str) -> NamedIntegrand:
    """Look up a named integrand, case-insensitively."""
    key = name.strip().lower()
    if key not in INTEGRANDS:
        raise InvalidArgument(
            f"Unknown integrand {name!r}. Choose from: {', '.join(sorted(INTEGRANDS))}"
        )
    return INTEGRANDS[key]


def list_integrands() -> List[NamedIntegrand]:
    return [INTEGRANDS[key] for key in sorted(INTEGRANDS)]


def function_label(fun: Callable[[float], float]) -> str:
    """Axis label for ``fun``: the stored label, else ``y = <name>(x)``."""
    label = getattr(fun, "label", None)
    if isinstance(label, str):
        return label
    if fun is parabola:
        return INTEGRANDS["parabola"].label
    if fun is shifted_cubic:
        return INTEGRANDS["cubic"].label
    name = getattr(fun, "__name__", None)
    if not name or name == "<lambda>":
        return "y = f(x)"
    return f"y = {name}(x)"
