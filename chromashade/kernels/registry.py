"""
Kernel registry.

Kernels are registered once, while the package is imported, and looked up
by name when a host binds them. Keys are normalized so ``fillRedColor``,
``fill-red-color`` and ``fill_red_color`` resolve to the same kernel. Once
``freeze()`` has been called the registry refuses further registrations.
"""

from __future__ import annotations

import logging
import numbers
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence, Tuple

from ..color_arr import ColorArray
from ..colors.color import Color
from ..errors import KernelNotFoundError, SignatureMismatchError
from ..types.bounds import BoundingRect
from ..types.param_types import ParamType

logger = logging.getLogger(__name__)

KernelFn = Callable[..., Color]


def _is_float(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


_type_checks: dict[ParamType, Callable[[Any], bool]] = {
    ParamType.FLOAT: _is_float,
    ParamType.COLOR: lambda v: isinstance(v, Color),
    ParamType.COLOR_ARRAY: lambda v: isinstance(v, ColorArray),
    ParamType.BOUNDING_RECT: lambda v: isinstance(v, BoundingRect),
}


@dataclass(frozen=True)
class KernelSignature:
    """
    Declared parameters of a kernel.

    Attributes:
        params: Types of the bound parameters, in declaration order
        takes_current_color: Whether the kernel receives the view's current
            color right after the position
    """
    params: Tuple[ParamType, ...] = ()
    takes_current_color: bool = True

    def check(self, values: Sequence[Any]) -> None:
        """
        Verify that ``values`` match this signature exactly.

        Raises:
            SignatureMismatchError: on a count or type mismatch
        """
        if len(values) != len(self.params):
            raise SignatureMismatchError(
                f"expected {len(self.params)} parameter(s) {self.describe()}, got {len(values)}"
            )
        for i, (expected, value) in enumerate(zip(self.params, values)):
            if not _type_checks[expected](value):
                raise SignatureMismatchError(
                    f"parameter {i} must be {expected.value}, got {type(value).__name__}"
                )

    def describe(self) -> str:
        return "(" + ", ".join(p.value for p in self.params) + ")"


@dataclass(frozen=True)
class Kernel:
    """A named per-pixel color function with its declared signature."""
    name: str
    signature: KernelSignature
    function: KernelFn

    def __call__(self, *args: Any) -> Color:
        return self.function(*args)


class KernelRegistry:
    """Name to kernel mapping, immutable once frozen."""

    def __init__(self) -> None:
        self._registry: dict[str, Kernel] = {}
        self._frozen = False

    # === key normalization ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """Registry key for ``name`` (e.g. "fillRedColor" -> "fill_red_color")."""
        if not isinstance(name, str):
            raise TypeError("kernel name must be a str")
        if not name:
            raise ValueError("kernel name must not be empty")
        name = name.replace("-", "_")
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    # === registration ===
    def register(self, name: str, signature: KernelSignature, function: KernelFn) -> Kernel:
        if self._frozen:
            raise RuntimeError(f"registry is frozen; cannot register '{name}'")
        key = self.normalize_key(name)
        existing = self._registry.get(key)
        if existing is not None and existing.function is not function:
            raise ValueError(f"'{key}' is already registered")
        entry = Kernel(key, signature, function)
        self._registry[key] = entry
        logger.debug("registered kernel %s%s", key, signature.describe())
        return entry

    def kernel(
        self,
        name: str | None = None,
        *params: ParamType,
        current_color: bool = True,
    ) -> Callable[[KernelFn], KernelFn]:
        """
        Decorator form of :meth:`register`.

        The name defaults to the function name. The function itself is
        returned unchanged so it stays callable directly.
        """
        signature = KernelSignature(tuple(params), current_color)

        def decorator(fn: KernelFn) -> KernelFn:
            self.register(name or fn.__name__, signature, fn)
            return fn

        return decorator

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # === lookup ===
    def lookup(self, name: str) -> Kernel:
        """
        Return the kernel registered under ``name``.

        Raises:
            KernelNotFoundError: if no kernel has that name
        """
        key = self.normalize_key(name)
        try:
            return self._registry[key]
        except KeyError:
            raise KernelNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._registry)

    def is_registered(self, name: str) -> bool:
        return self.normalize_key(name) in self._registry

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(name) and self.is_registered(name)

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def registry(self) -> Mapping[str, Kernel]:
        """Read-only view of the registered kernels."""
        return MappingProxyType(self._registry)


default_registry = KernelRegistry()
kernel = default_registry.kernel


def get_kernel(name: str) -> Kernel:
    return default_registry.lookup(name)


def list_kernels() -> list[str]:
    return default_registry.names()


__all__ = [
    "Kernel",
    "KernelSignature",
    "KernelRegistry",
    "default_registry",
    "kernel",
    "get_kernel",
    "list_kernels",
]
