"""
Flag kernels.

Each flag picks one of a few fixed colors by classifying the pixel against
the view's bounding rect.
"""

from ..colors.color import Color
from ..colors import palette
from ..geometry.regions import Disc, centered_circle, horizontal_thirds, vertical_thirds
from ..types.bounds import BoundingRect
from ..types.color_types import Position
from ..types.param_types import ParamType
from .registry import kernel


@kernel("italy_flag", ParamType.BOUNDING_RECT)
def italy_flag(position: Position, current_color: Color | None, bounds: BoundingRect) -> Color:
    """Green, white and red vertical bands."""
    return palette.ITALY[vertical_thirds(position, bounds)]


@kernel("germany_flag", ParamType.BOUNDING_RECT)
def germany_flag(position: Position, current_color: Color | None, bounds: BoundingRect) -> Color:
    """Black, red and gold horizontal bands."""
    return palette.GERMANY[horizontal_thirds(position, bounds)]


@kernel("japan_flag", ParamType.BOUNDING_RECT)
def japan_flag(position: Position, current_color: Color | None, bounds: BoundingRect) -> Color:
    """Red disc on a white field."""
    field, disc = palette.JAPAN
    if centered_circle(position, bounds) is Disc.INSIDE:
        return disc
    return field
