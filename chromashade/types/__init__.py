from .color_types import Scalar, ColorElement, Position, RectElement
from .param_types import ParamType
from .bounds import BoundingRect, bounds_for

__all__ = [
    "Scalar",
    "ColorElement",
    "Position",
    "RectElement",
    "ParamType",
    "BoundingRect",
    "bounds_for",
]
