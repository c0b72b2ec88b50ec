"""
Constant forward curve: f(u) = c everywhere, so back() = (inf, c).
"""

from __future__ import annotations

from .base_curve import Curve
from ...core.utils import NaN, INF


class Constant(Curve):
    def __init__(self, c: float = NaN):
        self.c = float(c)

    def __repr__(self) -> str:
        return f"Constant({self.c!r})"

    def value(self, u: float) -> float:
        return self.c

    def integral(self, u: float, t: float = 0.0) -> float:
        return self.c * (u - t)

    def extrapolate(self, _f: float | None = None):
        if _f is None:
            return self.c
        self.c = float(_f)
        return self

    def back(self) -> tuple[float, float]:
        return INF, self.c
