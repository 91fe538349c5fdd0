"""
Tiling index arithmetic.

Maps a continuous coordinate onto a repeating band of ``count`` tiles, each
``thickness`` units wide. The wrap is periodic with period
``count * thickness`` and holds for negative coordinates too.
"""

import math
import operator

from ..errors import DomainError


def wrap_index(raw: int, count: int) -> int:
    """
    Wrap a signed integer into [0, count).

    The double modulo normalizes the sign regardless of how the modulo
    operator treats negative operands.
    """
    return ((raw % count) + count) % count


def stripe_index(y: float, thickness: float, count: int) -> int:
    """
    Index of the stripe that contains coordinate ``y``.

    Args:
        y: Coordinate along the tiling axis
        thickness: Width of one stripe; must be non-zero
        count: Number of stripes before the pattern repeats; must be > 0

    Returns:
        Integer in [0, count)

    Raises:
        DomainError: if ``count <= 0``, ``thickness == 0`` or the quotient
            ``y / thickness`` is not finite.
    """
    count = operator.index(count)
    if count <= 0:
        raise DomainError(f"stripe count must be positive, got {count}")
    if thickness == 0:
        raise DomainError("stripe thickness must be non-zero")

    q = y / thickness
    if not math.isfinite(q):
        raise DomainError(f"stripe coordinate is not finite: y={y!r}, thickness={thickness!r}")
    return wrap_index(math.floor(q), count)

