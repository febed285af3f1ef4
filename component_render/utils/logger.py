"""Simple logging utilities for component_render.

Every module logs through a named child of the ``component_render`` logger;
the stream handler is attached once, on the package logger.
"""
import logging
from typing import Optional

ROOT_LOGGER = "component_render"


def get_logger(name: str = ROOT_LOGGER, level: Optional[str] = None) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    if level:
        root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logging.getLogger(name)
