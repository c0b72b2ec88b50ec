import logging
import math

import numpy as np
import pytest

from fwdcurve.rates.termstructure.base_curve import Curve
from fwdcurve.rates.termstructure.constant import Constant
from fwdcurve.rates.termstructure.plus import Plus
from fwdcurve.rates.termstructure.pwflat_curve import PiecewiseFlat


def _curve(_f: float = 5.0) -> PiecewiseFlat:
    return PiecewiseFlat([1, 2, 3], [2, 3, 4], _f)


def test_curve_is_abstract():
    with pytest.raises(TypeError):
        Curve()


def test_constant():
    c = Constant(1.0)
    assert c.value(0) == 1
    assert c.value(100) == 1
    assert c.integral(0) == 0
    for u, t in [(2.0, 0.0), (3.0, 1.0), (1.0, 4.0)]:
        assert c.integral(u, t) == 1.0 * (u - t)
    assert c.back() == (math.inf, 1.0)
    assert c.extrapolate() == 1.0
    assert c.extrapolate(2.0) is c
    assert c.value(0) == 2
    assert math.isnan(Constant().value(1.0))


def test_constant_derived():
    c = Constant(0.05)
    assert c.discount(0) == 1
    assert c.discount(2.0) == pytest.approx(math.exp(-0.1))
    assert c.discount(3.0, 1.0) == pytest.approx(math.exp(-0.1))
    assert c.spot(2.0) == pytest.approx(0.05)
    assert c.forward(1.0, 2.0) == 0.05
    assert math.isnan(c.spot(1.0, 1.0))


def test_pwflat_curve_value_integral():
    p = PiecewiseFlat([1, 2, 3], [2, 3, 4])
    assert p.value(0) == 2
    assert p.value(1) == 2
    assert p.value(1.1) == 3
    assert p.value(2.9) == 4
    assert p.value(3) == 4
    assert math.isnan(p.value(3.1))
    assert math.isnan(p.value(-0.1))
    assert p.integral(2) == 5
    assert p.integral(3, 1) == 7
    assert p.integral(3.5, 0) != p.integral(3.5, 0)  # NaN tail
    assert p.extrapolate(5.0) is p
    assert p.integral(3.5) == 11.5


def test_pwflat_curve_derived():
    p = _curve()
    assert p.discount(0) == 1
    assert p.discount(2.0) == pytest.approx(math.exp(-5.0))
    assert p.discount(3.0, 1.0) == pytest.approx(math.exp(-7.0))
    assert p.forward(0.5, 1.0) == p.value(1.5) == 3
    assert p.spot(2.0) == pytest.approx(2.5)
    assert p.spot(3.0, 1.0) == pytest.approx(3.5)
    for u in [0.25, 0.5, 1.0]:
        assert p.spot(u) == pytest.approx(p.value(u))


def test_pwflat_curve_no_knots_is_constant():
    p = PiecewiseFlat(_f=3.0)
    assert len(p) == 0
    assert p.value(0) == 3
    assert p.integral(5, 0) == 15
    p.extrapolate(7.0)
    assert p.value(0) == 7
    assert p.integral(3, 0) == 21
    with pytest.raises(ValueError):
        p.back()


def test_pwflat_curve_owns_knots():
    t = np.array([1.0, 2.0])
    f = np.array([0.01, 0.02])
    p = PiecewiseFlat(t, f, 0.03)
    t[0] = 1.5
    f[0] = 0.5
    assert p.back() == (2.0, 0.02)
    assert p.value(1.25) == 0.02
    assert p.value(0.5) == 0.01
    with pytest.raises(ValueError):
        p.time[0] = 0.0


def test_pwflat_curve_translate():
    p = PiecewiseFlat([1, 2, 4], [2, 3, 4], 5.0)
    q = p.translate(1.5)
    assert np.array_equal(q.time, [0.5, 2.5])
    assert np.array_equal(q.forward_values, [3, 4])
    assert q.extrapolate() == 5.0
    # as seen forward: q(u) == p(u + 1.5)
    for u in [0.1, 0.5, 1.0, 2.5, 3.0]:
        assert q.value(u) == p.forward(u, 1.5)
    # p itself is unchanged
    assert np.array_equal(p.time, [1, 2, 4])
    assert len(p.translate(10.0)) == 0


def test_plus_value_and_back():
    f = _curve()
    g = Constant(0.5)
    h = f + g
    assert isinstance(h, Plus)
    for u in [0.0, 0.5, 1.0, 2.5, 3.0, 4.0]:
        assert h.value(u) == f.value(u) + g.value(u)
    assert h.back() == (3.0, 4.5)
    assert h.extrapolate() == 5.5


def test_plus_scalar_spread():
    c1 = Constant(1.0)
    c2 = Constant(3.0)
    assert (c1 + c2).value(0) == 4.0
    assert (c1 + 2.0).value(0) == 3.0
    assert (2.0 + c1).value(0) == 3.0
    assert Plus(c1, 2.0).back() == (math.inf, 3.0)


def test_plus_references_operands():
    f = PiecewiseFlat([1.0], [0.02], 0.03)
    h = f + 0.01
    assert h.value(2.0) == pytest.approx(0.04)
    f.extrapolate(0.05)
    assert h.value(2.0) == pytest.approx(0.06)


def test_plus_extrapolate_is_not_distributed(caplog):
    f = _curve()
    g = PiecewiseFlat([2.0], [1.0], 1.0)
    h = Plus(f, g)
    with caplog.at_level(logging.DEBUG, logger="fwdcurve"):
        assert h.extrapolate(9.0) is h
    assert f.extrapolate() == 5.0
    assert g.extrapolate() == 1.0
    assert "ignored" in caplog.text
    assert h.back() == (2.0, 5.0)


def test_plus_integral_from_zero():
    f = _curve()
    g = Constant(1.0)
    h = f + g
    assert h.integral(2.0) == 7.0
    # lower bound is not passed to the operands
    assert h.integral(2.0, 1.0) == h.integral(2.0)
    assert h.discount(0) == 1


def test_negative_time_is_nan():
    p = _curve()
    assert math.isnan(p.value(-0.1))
    assert math.isnan(p.integral(-0.1))
    assert math.isnan(p.discount(-0.1))
    assert math.isnan((p + 1.0).value(-0.1))


def test_pwflat_curve_translate_leaves_knots_exact():
    p = PiecewiseFlat([0.01, 1.01], [1, 2], 3)
    before = p.time.copy()
    assert p.value(0.01) == 1
    q = p.translate(0.1)
    assert np.array_equal(p.time, before)
    assert p.value(0.01) == 1
    assert len(q) == 1
    assert q.value(0.5) == 2
    assert q.value(1.0) == 3


def test_pwflat_curve_translate_non_dyadic_sweep():
    t = np.round(np.linspace(0.01, 3.0, 300), 2)
    p = PiecewiseFlat(t, np.arange(t.size, dtype=float), -1.0)
    before = p.time.copy()
    values = [p.value(u) for u in before]
    for u in [0.1, 0.3, 0.7, 1.1]:
        p.translate(u)
        assert np.array_equal(p.time, before)
    assert [p.value(u) for u in before] == values


def test_discount_overflow_is_inf():
    p = PiecewiseFlat([1.0], [-1000.0], -1000.0)
    assert p.discount(1.0) == math.inf
    assert Constant(-800.0).discount(1.0) == math.inf
    assert (p + Constant(0.0)).discount(2.0) == math.inf
