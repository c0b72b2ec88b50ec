# fwdcurve/io/config.py
from __future__ import annotations
import logging
import pathlib

import yaml

from ..core.utils import as_knots, assert_finite, assert_same_length, NaN
from ..rates import pwflat
from ..rates.termstructure.base_curve import Curve
from ..rates.termstructure.constant import Constant
from ..rates.termstructure.plus import Plus
from ..rates.termstructure.pwflat_curve import PiecewiseFlat

logger = logging.getLogger(__name__)


def load_settings(path: str | pathlib.Path) -> dict:
    """
    Load the YAML settings file and return a dict.
    Uses yaml.safe_load. Raises FileNotFoundError if absent.
    Logging is left to the caller: setup_logging(cfg["logging"]["level"]).
    """
    p = pathlib.Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    # minimal validation
    required = ["curves"]
    for k in required:
        if k not in cfg:
            raise ValueError(f"Missing required key in settings: '{k}'")
    if not isinstance(cfg["curves"], dict):
        raise ValueError("settings: 'curves' must be a mapping of name -> curve")

    logger.info("Loaded %d curve definitions from %s", len(cfg["curves"]), p)
    return cfg


def _pwflat(name: str, entry: dict) -> PiecewiseFlat:
    for k in ("times", "forwards"):
        if k not in entry:
            raise ValueError(f"curve '{name}': missing '{k}'")
    t = as_knots(entry["times"])
    f = as_knots(entry["forwards"])
    assert_same_length(f"curve '{name}'", t, f)
    assert_finite(f"curve '{name}' times", t)
    if t.size == 0:
        raise ValueError(f"curve '{name}': pwflat needs at least one knot")
    if t[0] <= 0 or not pwflat.monotonic(t):
        raise ValueError(f"curve '{name}': times must be strictly increasing and > 0")
    return PiecewiseFlat(t, f, float(entry.get("extrapolate", NaN)))


def build_curves(cfg: dict) -> dict[str, Curve]:
    """
    Build curves from cfg['curves'], in file order.

    curves:
      base:   {type: pwflat, times: [1, 2, 3], forwards: [0.02, 0.025, 0.03], extrapolate: 0.03}
      spread: {type: constant, value: 0.001}
      risky:  {type: plus, left: base, right: spread}   # right may be a number
    """
    curves: dict[str, Curve] = {}

    def ref(name: str, r) -> Curve | float:
        if isinstance(r, (int, float)) and not isinstance(r, bool):
            return float(r)
        if not isinstance(r, str) or r not in curves:
            raise ValueError(f"curve '{name}': unknown curve '{r}' (define it earlier)")
        return curves[r]

    for name, entry in cfg["curves"].items():
        if not isinstance(entry, dict):
            raise ValueError(f"curve '{name}': entry must be a mapping")
        kind = entry.get("type")
        if kind == "constant":
            curves[name] = Constant(float(entry.get("value", NaN)))
        elif kind == "pwflat":
            curves[name] = _pwflat(name, entry)
        elif kind == "plus":
            left = ref(name, entry.get("left"))
            if not isinstance(left, Curve):
                raise ValueError(f"curve '{name}': 'left' must name a curve")
            curves[name] = Plus(left, ref(name, entry.get("right")))
        else:
            raise ValueError(f"curve '{name}': type must be 'constant', 'pwflat' or 'plus'")
        logger.debug("built curve '%s': %r", name, curves[name])

    return curves
