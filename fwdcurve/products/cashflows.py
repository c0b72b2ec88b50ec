"""
Cash flows of an instrument as (time, cash) pairs, valued on a forward curve.

Times are year fractions from the as-of date; how they were produced
(day count, calendar, coupon schedule) is up to the caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..core.utils import as_knots, assert_same_length
from ..rates import pwflat
from ..rates.termstructure.base_curve import Curve


@dataclass(frozen=True, eq=False)
class CashFlows:
    """
    time : payment times (years), strictly increasing and >= 0.
    cash : amount paid at each time.

    Float numpy arrays are held as given (no copy).
    """
    time: np.ndarray
    cash: np.ndarray

    def __post_init__(self) -> None:
        u, c = as_knots(self.time), as_knots(self.cash)
        assert_same_length("CashFlows", u, c)
        if u.size and (u[0] < 0.0 or not pwflat.monotonic(u)):
            raise ValueError("CashFlows: time must be strictly increasing and >= 0")
        object.__setattr__(self, "time", u)
        object.__setattr__(self, "cash", c)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "CashFlows":
        pts = [(float(u), float(c)) for u, c in pairs]
        if not pts:
            return cls(np.empty(0), np.empty(0))
        u, c = zip(*pts)
        return cls(np.array(u), np.array(c))

    def __len__(self) -> int:
        return int(self.time.size)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CashFlows):
            return NotImplemented
        return (np.array_equal(self.time, other.time)
                and np.array_equal(self.cash, other.cash))

    def back(self) -> tuple[float, float]:
        """Last (time, cash)."""
        if self.time.size == 0:
            raise ValueError("CashFlows: back() with no cash flows")
        return float(self.time[-1]), float(self.cash[-1])

    def remaining_after(self, t: float) -> "CashFlows":
        """
        Flows strictly after t, with times measured from t.
        """
        u = self.time.copy()
        with pwflat.Translate(t, u) as ut:
            n = ut.size
            return CashFlows(ut.copy(), self.cash[self.cash.size - n:].copy())


def present_value(cf: CashFlows, curve: Curve, t: float = 0.0) -> float:
    """
    PV(t) = sum_{u_i > t} c_i * D(u_i, t).
    """
    mask = cf.time > t
    if not mask.any():
        return 0.0
    D = np.array([curve.discount(float(u), t) for u in cf.time[mask]], dtype=float)
    return float(np.dot(cf.cash[mask], D))
