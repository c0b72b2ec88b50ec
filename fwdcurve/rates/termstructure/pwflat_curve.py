"""
Piecewise-flat forward curve owning its knots:

    f(u) = f[i] on (t[i-1], t[i]],  _f past t[n-1],  NaN for u < 0.

Evaluation is delegated to `fwdcurve.rates.pwflat`. Knot times must be
strictly increasing (check with `pwflat.monotonic` before building).
"""

from __future__ import annotations
import logging
from typing import Sequence

import numpy as np

from .base_curve import Curve
from .. import pwflat
from ...core.utils import NaN, copy_knots

logger = logging.getLogger(__name__)


class PiecewiseFlat(Curve):
    """
    Parameters
    ----------
    t : sequence of float
        Knot times in years, strictly increasing. Copied in.
    f : sequence of float
        Forward on each (t[i-1], t[i]]. Copied in.
    _f : float
        Extrapolation value past the last knot (default NaN).

    With no knots the curve is flat at _f.
    """

    def __init__(self, t: Sequence[float] = (), f: Sequence[float] = (), _f: float = NaN):
        self._t = copy_knots(t)
        self._f = copy_knots(f)
        self._e = float(_f)
        logger.debug("PiecewiseFlat: %d knots, extrapolate=%g", self._t.size, self._e)

    def __repr__(self) -> str:
        return f"PiecewiseFlat(t={self._t.tolist()}, f={self._f.tolist()}, _f={self._e!r})"

    def __len__(self) -> int:
        return int(self._t.size)

    @property
    def time(self) -> np.ndarray:
        """Knot times (read-only view)."""
        v = self._t.view()
        v.flags.writeable = False
        return v

    @property
    def forward_values(self) -> np.ndarray:
        """Forward values on each knot interval (read-only view)."""
        v = self._f.view()
        v.flags.writeable = False
        return v

    # ---- Curve -----------------------------------------------------------------

    def value(self, u: float) -> float:
        return pwflat.value(u, self._t, self._f, self._e)

    def integral(self, u: float, t: float = 0.0) -> float:
        return (pwflat.integral(u, self._t, self._f, self._e)
                - pwflat.integral(t, self._t, self._f, self._e))

    def extrapolate(self, _f: float | None = None):
        if _f is None:
            return self._e
        self._e = float(_f)
        return self

    def back(self) -> tuple[float, float]:
        if self._t.size == 0:
            raise ValueError("PiecewiseFlat: back() on a curve with no knots")
        return float(self._t[-1]), float(self._f[-1])

    # ---- re-anchoring ----------------------------------------------------------

    def translate(self, u: float) -> "PiecewiseFlat":
        """
        The curve as seen u years forward: knots after u, measured from u,
        same forwards and extrapolation. This curve is left unchanged.
        """
        with pwflat.Translate(u, self._t.copy()) as tu:
            n = tu.size
            return PiecewiseFlat(tu, self._f[self._f.size - n:], self._e)
