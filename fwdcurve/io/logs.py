"""
Logging setup for the fwdcurve package logger.

Modules log through logging.getLogger(__name__); nothing is emitted until
the application configures handlers, e.g. with setup_logging().
"""

from __future__ import annotations
import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PACKAGE = "fwdcurve"


def setup_logging(level: str | int = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach one stream handler to the package logger and set its level.
    Calling again only updates level/format.
    """
    log = logging.getLogger(_PACKAGE)
    if isinstance(level, str):
        lvl = logging.getLevelName(level.upper())
        if not isinstance(lvl, int):
            raise ValueError(f"setup_logging: unknown level '{level}'")
        level = lvl
    log.setLevel(level)

    handler = next((h for h in log.handlers if getattr(h, "_fwdcurve", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._fwdcurve = True
        log.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))

    return log
