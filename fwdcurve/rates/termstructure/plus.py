"""
Sum of two curves, (f + g)(u) = f(u) + g(u).

Plus holds references to its operands, not copies: later changes to f or g
(e.g. f.extrapolate(x)) show through the sum.
"""

from __future__ import annotations
import logging

from .base_curve import Curve
from .constant import Constant

logger = logging.getLogger(__name__)


class Plus(Curve):
    """
    Parameters
    ----------
    f : Curve
    g : Curve or float
        A float is a constant spread, i.e. Constant(g).
    """

    def __init__(self, f: Curve, g: Curve | float):
        self.f = f
        self.g = g if isinstance(g, Curve) else Constant(g)

    def __repr__(self) -> str:
        return f"Plus({self.f!r}, {self.g!r})"

    def value(self, u: float) -> float:
        return self.f.value(u) + self.g.value(u)

    def integral(self, u: float, t: float = 0.0) -> float:
        # lower bound is not passed through: both operands integrate from 0
        return self.f.integral(u) + self.g.integral(u)

    def extrapolate(self, _f: float | None = None):
        if _f is None:
            return self.f.extrapolate() + self.g.extrapolate()
        # not distributed: extrapolate the operands themselves
        logger.debug("Plus: extrapolate(%g) ignored", _f)
        return self

    def back(self) -> tuple[float, float]:
        """Smallest last point on both curves."""
        fu, fv = self.f.back()
        gu, gv = self.g.back()

        return min(fu, gu), fv + gv
