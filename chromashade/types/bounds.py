from __future__ import annotations
import math
from typing import NamedTuple

from ..errors import DomainError


class BoundingRect(NamedTuple):
    """Extent of the view being shaded, in the view's local space.

    Only ``width`` and ``height`` are read by the region classifiers; the
    origin is carried so the layout matches what a host hands over.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        """True when the rectangle cannot be split into regions."""
        w, h = self.width, self.height
        return not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0

    def require_area(self) -> "BoundingRect":
        if self.is_degenerate:
            raise DomainError(
                f"bounds must have a positive, finite width and height, got {tuple(self)!r}"
            )
        return self


def bounds_for(width: float, height: float) -> BoundingRect:
    """Bounding rect of a view of the given size anchored at the origin."""
    return BoundingRect(0.0, 0.0, float(width), float(height))
