"""Built-in kernels. Importing this package registers them and freezes the default registry."""

from .registry import (
    Kernel,
    KernelSignature,
    KernelRegistry,
    default_registry,
    kernel,
    get_kernel,
    list_kernels,
)
from .binding import BoundKernel, bind
from .fills import (
    fill_red_color,
    fill_green_color,
    fill_blue_color,
    fill_orange_color,
    fill_color,
    color_blend,
)
from .stripes import stripes
from .flags import italy_flag, germany_flag, japan_flag

default_registry.freeze()

__all__ = [
    "Kernel",
    "KernelSignature",
    "KernelRegistry",
    "BoundKernel",
    "default_registry",
    "kernel",
    "get_kernel",
    "list_kernels",
    "bind",
    "fill_red_color",
    "fill_green_color",
    "fill_blue_color",
    "fill_orange_color",
    "fill_color",
    "color_blend",
    "stripes",
    "italy_flag",
    "germany_flag",
    "japan_flag",
]
