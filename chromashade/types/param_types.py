# No dependencies
from enum import Enum


class ParamType(str, Enum):
    """Kinds of value a kernel parameter can be bound to."""
    FLOAT = "float"
    COLOR = "color"
    COLOR_ARRAY = "color_array"
    BOUNDING_RECT = "bounding_rect"
