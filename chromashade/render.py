"""
Shading pass
============

A small host for the kernels: evaluates a bound kernel once per pixel of a
``width x height`` view and collects the results in an RGBA float array.

Pixels are sampled at their centers, ``(col + 0.5, row + 0.5)``, with y
growing downward. Each evaluation is independent, so a DomainError on one
pixel never changes the colors of its neighbors. What happens to the pass
is set by ``CHROMASHADE_DOMAIN_ERROR_POLICY``:

- ``raise`` (default): the first DomainError aborts the whole pass.
- ``fallback``: the failing pixel receives the configured fallback color,
  a warning is logged once per pass, and evaluation continues.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np
from numpy import ndarray as NDArray

from .colors.color import Color
from .errors import DomainError
from .kernels.binding import BoundKernel
from .settings import DomainErrorPolicy, Settings, get_settings
from .types.color_types import RGBA_CHANNELS, CHANNEL_MAX_INT

logger = logging.getLogger(__name__)


def _current_color_at(current: Union[Color, NDArray, None], row: int, col: int) -> Optional[Color]:
    if current is None or isinstance(current, Color):
        return current
    return Color(current[row, col])


def shade(
    bound: BoundKernel,
    width: int,
    height: int,
    current: Union[Color, NDArray, None] = None,
    settings: Settings | None = None,
) -> NDArray:
    """
    Run one shading pass.

    Args:
        bound: Kernel with its parameters already bound
        width: View width in pixels
        height: View height in pixels
        current: The view's current color, either one Color for every pixel
                 or an array of shape (height, width, 3|4). Ignored by kernels
                 that do not take a current color.
        settings: Overrides the global settings for this pass

    Returns:
        float32 array of shape (height, width, 4)

    Raises:
        ValueError: for negative sizes or a mis-shaped ``current`` array
        DomainError: under the ``raise`` policy, from the first failing pixel
    """
    if width < 0 or height < 0:
        raise ValueError(f"view size must be non-negative, got {width}x{height}")
    if isinstance(current, NDArray) and current.shape[:2] != (height, width):
        raise ValueError(
            f"current color array has shape {current.shape}, expected ({height}, {width}, 4)"
        )
    settings = settings or get_settings()
    fallback = settings.domain_error_policy is DomainErrorPolicy.FALLBACK

    logger.debug("shading %s over %dx%d", bound.name, width, height)
    out = np.empty((height, width, RGBA_CHANNELS), dtype=np.float32)
    failures = 0
    for row in range(height):
        y = row + 0.5
        for col in range(width):
            position = (col + 0.5, y)
            try:
                color = bound(position, _current_color_at(current, row, col))
            except DomainError as exc:
                if not fallback:
                    raise
                if failures == 0:
                    logger.warning(
                        "%s failed at %s (%s); substituting fallback color",
                        bound.name, position, exc,
                    )
                failures += 1
                color = settings.fallback_color
            out[row, col] = color.value

    if failures:
        logger.warning("%s: %d pixel(s) used the fallback color", bound.name, failures)
    return out


def to_uint8(array: NDArray) -> NDArray:
    """Scale a unit-float RGBA array to 0-255 and round."""
    return np.clip(np.rint(array * CHANNEL_MAX_INT), 0, CHANNEL_MAX_INT).astype(np.uint8)


def to_image(array: NDArray):
    """Convert a shading pass result to an RGBA ``PIL.Image.Image``."""
    from PIL import Image
    return Image.fromarray(to_uint8(array))
