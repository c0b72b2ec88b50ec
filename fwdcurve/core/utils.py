"""
Utilities: array coercion, numeric constants, sanity checks.

Intended to be lightweight and dependency-free (NumPy only).
"""

from __future__ import annotations
import math
from typing import Iterable

import numpy as np


NaN = math.nan
INF = math.inf


# ===== Arrays =================================================================

def as_knots(x: Iterable[float]) -> np.ndarray:
    """
    Read a sequence of knot times or values as a 1D float array.
    Arrays that already are 1D float are returned as is (no copy).
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise ValueError(f"knots: expected 1D, got {arr.ndim}D")
    return arr


def copy_knots(x: Iterable[float]) -> np.ndarray:
    """Owned float copy of a knot sequence."""
    return np.array(as_knots(x), dtype=float, copy=True)


# ===== Sanity checks / assertions ============================================

def assert_same_length(name: str, a: np.ndarray, b: np.ndarray) -> None:
    """Raise if a and b differ in length."""
    if len(a) != len(b):
        raise ValueError(f"{name}: lengths differ ({len(a)} != {len(b)})")


def assert_finite(name: str, arr: np.ndarray) -> None:
    """Raise if any NaN/Inf in arr."""
    arr = np.asarray(arr)
    if not np.isfinite(arr).all():
        raise ValueError(f"{name}: contains NaN/Inf")



# ===== Numerics ===============================================================

def exp_neg(x: float) -> float:
    """
    exp(-x), the discount for an integrated forward x.
    Returns inf when x is below about -709 (math.exp raises there).
    """
    try:
        return math.exp(-x)
    except OverflowError:
        return INF
