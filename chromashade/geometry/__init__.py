from .tiling import stripe_index, wrap_index
from .regions import (
    Third,
    Disc,
    vertical_thirds,
    horizontal_thirds,
    centered_circle,
    CIRCLE_RADIUS_FACTOR,
)

__all__ = [
    "stripe_index",
    "wrap_index",
    "Third",
    "Disc",
    "vertical_thirds",
    "horizontal_thirds",
    "centered_circle",
    "CIRCLE_RADIUS_FACTOR",
]
