"""
Forward curve base interface.

We work in *years*. Implementations must provide:
- value(u): forward f(u).
- integral(u, t=0): int_t^u f(s) ds.
- extrapolate(_f) / extrapolate(): set / get the tail value past the last knot.
- back(): last (non-extrapolated) point (time, value) on the curve.

Notes
-----
- forward, discount and spot are derived here from the above and are the
  same for every curve.
- Out of domain queries (u < 0) return NaN rather than raising.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from ...core.utils import NaN, exp_neg


class Curve(ABC):
    @abstractmethod
    def value(self, u: float) -> float:
        """Forward value at time u."""
        raise NotImplementedError

    @abstractmethod
    def integral(self, u: float, t: float = 0.0) -> float:
        """Integral from t to u of the forward, int_t^u f(s) ds."""
        raise NotImplementedError

    @abstractmethod
    def extrapolate(self, _f: float | None = None):
        """
        extrapolate(_f) sets the value used past the last knot and returns self.
        extrapolate() returns the current one.
        """
        raise NotImplementedError

    @abstractmethod
    def back(self) -> tuple[float, float]:
        """Last (non-extrapolated) point on the curve."""
        raise NotImplementedError

    # ---- derived ---------------------------------------------------------------

    def forward(self, u: float, t: float = 0.0) -> float:
        """Forward at u as seen from time t."""
        return self.value(u + t)

    def discount(self, u: float, t: float = 0.0) -> float:
        """Discount at u as seen from time t, D(u, t) = exp(-int_t^u f)."""
        return exp_neg(self.integral(u, t))

    def spot(self, u: float, t: float = 0.0) -> float:
        """
        Spot r(u, t) satisfying D(u, t) = exp(-r(u, t) (u - t)).
        NaN for u == t.
        """
        if u == t:
            return NaN
        # -log(D(u, t)) without the exp/log round trip
        return self.integral(u, t) / (u - t)

    # ---- composition -----------------------------------------------------------

    def __add__(self, other):
        from .plus import Plus
        if isinstance(other, Curve):
            return Plus(self, other)
        if isinstance(other, (int, float)):
            return Plus(self, float(other))
        return NotImplemented

    def __radd__(self, other):
        from .plus import Plus
        if isinstance(other, (int, float)):
            return Plus(self, float(other))
        return NotImplemented
