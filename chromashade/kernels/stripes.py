from ..color_arr import ColorArray
from ..colors.color import Color
from ..errors import DomainError
from ..geometry.tiling import stripe_index
from ..types.color_types import Position
from ..types.param_types import ParamType
from .registry import kernel


@kernel("stripes", ParamType.FLOAT, ParamType.COLOR_ARRAY, current_color=False)
def stripes(position: Position, thickness: float, colors: ColorArray, count: int) -> Color:
    """
    Horizontal bands of ``thickness`` cycling through ``colors``.

    Args:
        position: (x, y) pixel position; only y is read
        thickness: Height of one band
        colors: Band colors, top to bottom
        count: Number of colors to cycle through

    Raises:
        DomainError: if ``count <= 0``, ``count`` exceeds the array length,
            or ``thickness == 0``
    """
    if count <= 0:
        raise DomainError(f"stripes needs at least one color, got count={count}")
    if count > len(colors):
        raise DomainError(f"count={count} exceeds the {len(colors)} colors bound")
    return colors[stripe_index(float(position[1]), thickness, count)].opaque()
