"""
Piecewise-flat forward on knot arrays.

           { f[i]  if t[i-1] < u <= t[i]   (t[-1] := 0)
    f(u) = { _f    if u > t[n-1]
           { NaN   if u < 0

    F                                   _f
    |        f[1]             f[n-1] o--------
    | f[0] o------          o--------x
    x------x      ... ------x
    |
    0-----t[0]--- ... ---t[n-2]---t[n-1]--- T

Knot times are assumed strictly increasing (see `monotonic`); this is not checked
here. Domain errors (u < 0, len(t) != len(f)) come back as NaN, never raise.
"""

from __future__ import annotations
import logging
from typing import Sequence

import numpy as np

from ..core.utils import NaN, as_knots, exp_neg

logger = logging.getLogger(__name__)


def monotonic(t: Sequence[float]) -> bool:
    """True if t is strictly increasing (vacuously for len(t) < 2)."""
    t = as_knots(t)
    return bool(np.all(np.diff(t) > 0))


def value(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """Forward f(u), extrapolated by _f past the last knot."""
    if u < 0:
        return NaN
    t, f = as_knots(t), as_knots(f)
    if t.size != f.size:
        return NaN
    if t.size == 0:
        return float(_f)

    # first i with t[i] >= u
    i = int(np.searchsorted(t, u, side="left"))

    return float(_f) if i == t.size else float(f[i])


def integral(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """int_0^u f(s) ds."""
    if u < 0:
        return NaN
    t, f = as_knots(t), as_knots(f)
    if t.size != f.size:
        return NaN
    if u == 0:
        return 0.0
    if t.size == 0:
        return float(u * _f)

    I = 0.0
    t_ = 0.0
    i = 0
    n = t.size
    while i < n and t[i] <= u:
        I += f[i] * (t[i] - t_)
        t_ = t[i]
        i += 1
    if u > t_:
        I += (_f if i == n else f[i]) * (u - t_)

    return float(I)


def discount(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """D(u) = exp(-int_0^u f(s) ds)."""
    return exp_neg(integral(u, t, f, _f))


def spot(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """
    Spot r(u) = (int_0^u f(s) ds) / u.

    Equal to f(u) while u <= t[0]; the average only departs from the
    forward once u is past the first knot.
    """
    if u < 0:
        return NaN
    t, f = as_knots(t), as_knots(f)
    if t.size != f.size:
        return NaN
    if t.size == 0:
        return float(_f)
    if u <= t[0]:
        return value(u, t, f, _f)

    return integral(u, t, f, _f) / u


def translate(u: float, t: np.ndarray) -> np.ndarray:
    """
    Shift t -> t - u in place and return the view of knots with t - u > 0.

    Knots at or before the new origin stay in storage, they are only
    left out of the returned view. `t` must be a float numpy array.
    """
    t -= u
    m = int(np.searchsorted(t, 0.0, side="right"))

    return t[m:]


class Translate:
    """
    Scoped translation of a knot array.

        with Translate(u, t) as tu:
            ...  # tu: knots after u, measured from u

    On exit (normal or not) the full array is shifted back by +u.
    Not reentrant on the same array.
    """

    def __init__(self, u: float, t: np.ndarray):
        if not isinstance(t, np.ndarray) or not np.issubdtype(t.dtype, np.floating):
            raise TypeError("Translate: t must be a float numpy array (shifted in place)")
        self.u = u
        self.t = t
        self._n = 0

    def __enter__(self) -> np.ndarray:
        view = translate(self.u, self.t)
        self._n = view.size
        if self._n < self.t.size:
            logger.debug("translate(%g): %d of %d knots at or before origin",
                         self.u, self.t.size - self._n, self.t.size)
        return view

    def __exit__(self, exc_type, exc, tb) -> None:
        translate(-self.u, self.t)

    def __len__(self) -> int:
        return self._n
