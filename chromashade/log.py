"""
Logging helper.

Modules get their logger with ``logging.getLogger(__name__)``. Applications
that have not configured logging can call ``setup_default_logging`` once.
"""

from __future__ import annotations

import logging

from .settings import get_settings


def setup_default_logging(level: int | str | None = None) -> None:
    """Apply a minimal logging configuration, once.

    Does nothing if the root logger already has handlers. Without an explicit
    level, ``CHROMASHADE_LOG_LEVEL`` is used.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.WARNING)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
