from ..colors.blend import mix
from ..colors.color import Color
from ..colors import palette
from ..types.color_types import Position
from ..types.param_types import ParamType
from .registry import kernel


@kernel("fill_red_color")
def fill_red_color(position: Position, current_color: Color | None) -> Color:
    return palette.RED


@kernel("fill_green_color")
def fill_green_color(position: Position, current_color: Color | None) -> Color:
    return palette.GREEN


@kernel("fill_blue_color")
def fill_blue_color(position: Position, current_color: Color | None) -> Color:
    return palette.BLUE


@kernel("fill_orange_color")
def fill_orange_color(position: Position, current_color: Color | None) -> Color:
    return palette.ORANGE


@kernel("fill_color", ParamType.COLOR)
def fill_color(position: Position, current_color: Color | None, new_color: Color) -> Color:
    """Replace every pixel with ``new_color``, made opaque."""
    return new_color.opaque()


@kernel("color_blend", ParamType.COLOR, ParamType.COLOR)
def color_blend(
    position: Position,
    current_color: Color | None,
    bottom_color: Color,
    top_color: Color,
) -> Color:
    """Even mix of two colors; see :func:`chromashade.colors.blend.mix`."""
    return mix(bottom_color, top_color)
