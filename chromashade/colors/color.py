from __future__ import annotations
from typing import ClassVar, Iterator, Tuple, cast
from numpy import ndarray
import numpy as np

from ..types.color_types import (
    ColorElement,
    RGBA_CHANNELS,
    RGB_CHANNELS,
    CHANNEL_MAX_INT,
)


class Color:
    """
    Normalized RGBA color with every channel a float in [0, 1].

    Instances are immutable. A 3-channel value is completed with an opaque
    alpha of 1.0. Values are stored as given: the constructor does not clamp,
    so out-of-range channels pass through unchanged.
    """
    __slots__ = ('_value', '_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = RGBA_CHANNELS

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement) -> None:
        if isinstance(value, Color):
            channels = value.value
        elif isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(f"Color expects a 1D array, got shape {value.shape}")
            channels = tuple(float(v) for v in value.tolist())
        else:
            channels = tuple(float(v) for v in value)

        if len(channels) == RGB_CHANNELS:
            channels = channels + (1.0,)
        elif len(channels) != self.num_channels:
            raise ValueError(
                f"Color expects {RGB_CHANNELS} or {self.num_channels} channels, got {len(channels)}"
            )

        self._value = cast(Tuple[float, float, float, float], channels)
        # freeze instance — no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, float, float, float]:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return self._value[:3]

    @property
    def is_opaque(self) -> bool:
        return self._value[3] == 1.0

    # ------------------ CONVERSIONS ------------------
    def as_array(self) -> ndarray:
        """Return the channels as a float32 array of shape (4,)."""
        return np.array(self._value, dtype=np.float32)

    def to_int(self) -> Tuple[int, int, int, int]:
        """Return the channels scaled to 0-255 and rounded."""
        return cast(
            Tuple[int, int, int, int],
            tuple(int(round(c * CHANNEL_MAX_INT)) for c in self._value),
        )

    def opaque(self) -> Color:
        """Return the same color with alpha forced to 1."""
        if self.is_opaque:
            return self
        return Color(self.rgb)

    # ------------------ SEQUENCE PROTOCOL ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"Color({r:.4g}, {g:.4g}, {b:.4g}, {a:.4g})"


def from_channels(r: int, g: int, b: int) -> Color:
    """
    Build an opaque color from 0-255 integer channels.

    Each channel is divided by 255 with float division and alpha is set to 1.
    Inputs outside [0, 255] are not checked.

    Args:
        r: Red channel, 0-255
        g: Green channel, 0-255
        b: Blue channel, 0-255

    Returns:
        Color with channels (r/255, g/255, b/255, 1.0)
    """
    return Color((r / CHANNEL_MAX_INT, g / CHANNEL_MAX_INT, b / CHANNEL_MAX_INT, 1.0))
