"""
Chromashade - per-pixel color kernels
=====================================

A small library of pure color kernels evaluated once per output pixel,
plus the primitives they are built from.

Key Features
------------
- Immutable normalized RGBA colors, built from 0-255 channels
- Periodic stripe indexing that is correct for negative coordinates
- Region classification (thirds, centered circle) with strict boundaries
- A kernel registry with declared signatures, validated at bind time
- A reference shading pass producing numpy arrays or Pillow images

Quick Start
-----------
>>> from chromashade import bind, bounds_for, shade, to_image
>>> flag = bind("italy_flag", bounds_for(300, 200))
>>> flag((250, 10)).to_int()
(205, 33, 42, 255)
>>> img = to_image(shade(flag, 300, 200))
"""

from .errors import (
    ChromashadeError,
    ConfigurationError,
    KernelNotFoundError,
    SignatureMismatchError,
    DomainError,
)
from .colors import Color, from_channels, mix, palette
from .color_arr import ColorArray
from .types import BoundingRect, ParamType, bounds_for
from .geometry import (
    stripe_index,
    wrap_index,
    Third,
    Disc,
    vertical_thirds,
    horizontal_thirds,
    centered_circle,
)
from .kernels import (
    Kernel,
    KernelSignature,
    KernelRegistry,
    BoundKernel,
    default_registry,
    get_kernel,
    list_kernels,
    bind,
)
from .render import shade, to_image, to_uint8
from .settings import Settings, DomainErrorPolicy, get_settings, reload_from_env
from .log import setup_default_logging

__version__ = "0.1.0"

__all__ = [
    # errors
    "ChromashadeError",
    "ConfigurationError",
    "KernelNotFoundError",
    "SignatureMismatchError",
    "DomainError",
    # colors
    "Color",
    "ColorArray",
    "from_channels",
    "mix",
    "palette",
    # geometry
    "BoundingRect",
    "bounds_for",
    "stripe_index",
    "wrap_index",
    "Third",
    "Disc",
    "vertical_thirds",
    "horizontal_thirds",
    "centered_circle",
    # kernels
    "ParamType",
    "Kernel",
    "KernelSignature",
    "KernelRegistry",
    "BoundKernel",
    "default_registry",
    "get_kernel",
    "list_kernels",
    "bind",
    # host
    "shade",
    "to_image",
    "to_uint8",
    # configuration
    "Settings",
    "DomainErrorPolicy",
    "get_settings",
    "reload_from_env",
    "setup_default_logging",
]
