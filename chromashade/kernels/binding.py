"""
Parameter binding.

A host binds a kernel once per shading pass. Binding resolves the name and
validates the parameters against the declared signature, so configuration
errors surface before any pixel is evaluated. The returned ``BoundKernel``
is then called once per pixel.

Color arrays are expanded at the call boundary into ``(array, count)``,
which is the form the array-consuming kernels declare.
"""

from __future__ import annotations

from typing import Any, Tuple, Union

from ..color_arr import ColorArray
from ..colors.color import Color
from ..types.color_types import Position
from .registry import Kernel, KernelRegistry, default_registry


class BoundKernel:
    """A kernel together with the parameters bound for one shading pass."""
    __slots__ = ('kernel', 'params', '_args')

    def __init__(self, kernel: Kernel, params: Tuple[Any, ...]) -> None:
        kernel.signature.check(params)
        self.kernel = kernel
        self.params = params
        self._args = _expand(params)

    @property
    def name(self) -> str:
        return self.kernel.name

    def __call__(self, position: Position, current_color: Color | None = None) -> Color:
        if self.kernel.signature.takes_current_color:
            return self.kernel.function(position, current_color, *self._args)
        return self.kernel.function(position, *self._args)

    def __repr__(self) -> str:
        return f"BoundKernel({self.kernel.name!r}, {len(self.params)} param(s))"


def _expand(params: Tuple[Any, ...]) -> Tuple[Any, ...]:
    args: list[Any] = []
    for value in params:
        if isinstance(value, ColorArray):
            args.extend((value, value.count))
        else:
            args.append(value)
    return tuple(args)


def bind(
    kernel: Union[str, Kernel],
    *params: Any,
    registry: KernelRegistry | None = None,
) -> BoundKernel:
    """
    Resolve a kernel and bind its parameters.

    Args:
        kernel: Kernel name or an already resolved Kernel
        *params: Parameter values in declaration order
        registry: Registry to resolve names in (defaults to the built-in one)

    Returns:
        BoundKernel ready for per-pixel evaluation

    Raises:
        KernelNotFoundError: if the name is not registered
        SignatureMismatchError: if the parameters do not match the signature
    """
    if isinstance(kernel, str):
        kernel = (registry if registry is not None else default_registry).lookup(kernel)
    return BoundKernel(kernel, tuple(params))
