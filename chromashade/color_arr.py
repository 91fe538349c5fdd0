"""
Color Array Module
==================

Read-only ordered sequence of colors handed to kernels that need indexed
lookup (the stripes kernel). The colors are packed once into a
non-writeable float32 array of shape (count, 4) for bulk use, and kept as
Color instances for per-pixel lookup, so no per-pixel copy is ever made.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Tuple, Union
from numpy import ndarray as NDArray
import numpy as np

from .colors.color import Color
from .types.color_types import RGBA_CHANNELS, RGB_CHANNELS


class ColorArray:
    __slots__ = ('_arr', '_colors')

    def __init__(self, colors: Union[Iterable[Color], NDArray]) -> None:
        """
        Args:
            colors: Colors in order, or an array of shape (N, 3) or (N, 4)
                    holding unit floats. Three-channel rows get alpha 1.
        """
        if isinstance(colors, NDArray):
            if colors.ndim != 2 or colors.shape[-1] not in (RGB_CHANNELS, RGBA_CHANNELS):
                raise ValueError(
                    f"ColorArray requires shape (N, 3) or (N, 4), got {colors.shape}"
                )
            items = tuple(Color(row) for row in colors)
        else:
            items = tuple(Color(c) for c in colors)

        arr = np.array([c.value for c in items], dtype=np.float32).reshape(len(items), RGBA_CHANNELS)
        arr.flags.writeable = False
        self._arr = arr
        self._colors: Tuple[Color, ...] = items

    @property
    def count(self) -> int:
        """Number of colors in the array."""
        return len(self._colors)

    @property
    def value(self) -> NDArray:
        """The backing (count, 4) array. It is not writeable."""
        return self._arr

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """
        Enable numpy array interface.

        ``copy=False`` returns the read-only backing array itself and raises
        if a dtype conversion would need a copy.
        """
        if dtype is not None and np.dtype(dtype) != self._arr.dtype:
            if copy is False:
                raise ValueError(f"ColorArray cannot be viewed as {np.dtype(dtype)} without a copy")
            return self._arr.astype(dtype)
        if copy is False:
            return self._arr
        return self._arr.copy()

    def __repr__(self) -> str:
        return f"ColorArray(count={self.count})"
