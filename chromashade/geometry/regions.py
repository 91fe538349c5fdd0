"""
Region classification.

Assigns a pixel position to one of a small set of named regions of a
bounding rectangle. All comparisons are strict ``<``, so a position that
lies exactly on a boundary belongs to the region with the lower index
(for thirds) or to the outside (for the circle).
"""

from __future__ import annotations
import math
from enum import IntEnum
from typing import Tuple

from ..errors import DomainError
from ..types.bounds import BoundingRect
from ..types.color_types import Position, RectElement

CIRCLE_RADIUS_FACTOR = 0.3


class Third(IntEnum):
    """One of three equal spans along an axis, in increasing coordinate order."""
    FIRST = 0
    SECOND = 1
    THIRD = 2


class Disc(IntEnum):
    """Position relative to the centered circle."""
    OUTSIDE = 0
    INSIDE = 1


def _unpack_position(position: Position) -> Tuple[float, float]:
    x, y = float(position[0]), float(position[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise DomainError(f"position must be finite, got ({x!r}, {y!r})")
    return x, y


def _as_bounds(bounds: BoundingRect | RectElement) -> BoundingRect:
    if not isinstance(bounds, BoundingRect):
        bounds = BoundingRect(*(float(v) for v in bounds))
    return bounds.require_area()


def _third(value: float, extent: float) -> Third:
    if value < extent / 3:
        return Third.FIRST
    if value < 2 * extent / 3:
        return Third.SECOND
    return Third.THIRD


def vertical_thirds(position: Position, bounds: BoundingRect | RectElement) -> Third:
    """
    Classify ``position.x`` into left, middle or right third of the width.

    Args:
        position: (x, y) pixel position
        bounds: (x, y, width, height) of the view

    Returns:
        Third.FIRST if x < width/3, Third.SECOND if x < 2*width/3, else Third.THIRD

    Raises:
        DomainError: for non-finite positions or bounds without positive area
    """
    x, _ = _unpack_position(position)
    return _third(x, _as_bounds(bounds).width)


def horizontal_thirds(position: Position, bounds: BoundingRect | RectElement) -> Third:
    """Same as :func:`vertical_thirds`, over ``position.y`` and the height."""
    _, y = _unpack_position(position)
    return _third(y, _as_bounds(bounds).height)


def centered_circle(position: Position, bounds: BoundingRect | RectElement) -> Disc:
    """
    Classify a position as inside or outside the circle centered in the bounds.

    The center is (width/2, height/2) and the radius is 0.3 * min(width, height).
    A position at exactly the radius is outside.
    """
    x, y = _unpack_position(position)
    rect = _as_bounds(bounds)
    cx, cy = rect.width / 2, rect.height / 2
    radius = CIRCLE_RADIUS_FACTOR * min(rect.width, rect.height)
    if math.hypot(x - cx, y - cy) < radius:
        return Disc.INSIDE
    return Disc.OUTSIDE
