from .color import Color, from_channels
from .blend import mix
from . import palette

__all__ = ["Color", "from_channels", "mix", "palette"]
