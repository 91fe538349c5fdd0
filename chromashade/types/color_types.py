from __future__ import annotations
from typing import Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[ScalarVector, Sequence[Scalar], ndarray]
# (x, y) in the view's local space
Position = Union[Tuple[Scalar, Scalar], Sequence[Scalar], ndarray]
# (x, y, width, height)
RectElement = Tuple[Scalar, Scalar, Scalar, Scalar]

RGBA_CHANNELS = 4
RGB_CHANNELS = 3
CHANNEL_MAX_INT = 255
