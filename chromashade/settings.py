"""
Library settings read from the environment.

Every value has a default, so nothing needs to be set for normal use. Call
``reload_from_env()`` after changing the environment (tests do this through
monkeypatch).

Variables:
- CHROMASHADE_DOMAIN_ERROR_POLICY: "raise" (default) or "fallback"
- CHROMASHADE_FALLBACK_COLOR: "r,g,b" with 0-255 channels (default "255,0,255")
- CHROMASHADE_LOG_LEVEL: logging level name (default "WARNING")
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from enum import Enum

from .colors.color import Color, from_channels


class DomainErrorPolicy(str, Enum):
    RAISE = "raise"
    FALLBACK = "fallback"


_DEFAULT_FALLBACK = (255, 0, 255)


@dataclass
class Settings:
    domain_error_policy: DomainErrorPolicy = DomainErrorPolicy.RAISE
    fallback_color: Color = field(default_factory=lambda: from_channels(*_DEFAULT_FALLBACK))
    log_level: str = "WARNING"


_settings = Settings()


def _parse_policy(raw: str | None) -> DomainErrorPolicy:
    if raw is None or not raw.strip():
        return DomainErrorPolicy.RAISE
    try:
        return DomainErrorPolicy(raw.strip().lower())
    except ValueError:
        warnings.warn(
            f"Unknown domain error policy {raw!r}, defaulting to 'raise'",
            RuntimeWarning,
        )
        return DomainErrorPolicy.RAISE


def _parse_color(raw: str | None) -> Color:
    if raw is None or not raw.strip():
        return from_channels(*_DEFAULT_FALLBACK)
    try:
        r, g, b = (int(part) for part in raw.split(","))
    except ValueError:
        warnings.warn(
            f"Could not parse fallback color {raw!r}, expected 'r,g,b'",
            RuntimeWarning,
        )
        return from_channels(*_DEFAULT_FALLBACK)
    return from_channels(r, g, b)


def reload_from_env() -> Settings:
    """Re-read every setting from the environment and return the singleton."""
    _settings.domain_error_policy = _parse_policy(os.getenv("CHROMASHADE_DOMAIN_ERROR_POLICY"))
    _settings.fallback_color = _parse_color(os.getenv("CHROMASHADE_FALLBACK_COLOR"))
    _settings.log_level = (os.getenv("CHROMASHADE_LOG_LEVEL") or "WARNING").upper()
    return _settings


def get_settings() -> Settings:
    return _settings


reload_from_env()

__all__ = ["Settings", "DomainErrorPolicy", "get_settings", "reload_from_env"]
