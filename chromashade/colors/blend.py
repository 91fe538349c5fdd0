from .color import Color


def mix(bottom: Color, top: Color) -> Color:
    """
    Average two colors channel by channel.

    This is a fixed 50/50 linear interpolation of the RGB channels. The input
    alphas are ignored and the result is always opaque.
    """
    return Color((
        (bottom.r + top.r) / 2.0,
        (bottom.g + top.g) / 2.0,
        (bottom.b + top.b) / 2.0,
        1.0,
    ))
