import numpy as np
import pytest

from chromashade import Color, from_channels
from chromashade.colors import palette


def test_from_channels_divides_by_255():
    for r, g, b in [(0, 0, 0), (255, 255, 255), (12, 128, 254), (1, 2, 3), (205, 33, 42)]:
        c = from_channels(r, g, b)
        assert c.value == pytest.approx((r / 255, g / 255, b / 255, 1.0))
        assert c.alpha == 1.0


def test_from_channels_full_grid_stride():
    for r in range(0, 256, 15):
        for g in range(0, 256, 51):
            for b in (0, 127, 255):
                c = from_channels(r, g, b)
                assert 0.0 <= c.r <= 1.0 and 0.0 <= c.g <= 1.0 and 0.0 <= c.b <= 1.0
                assert abs(c.r - r / 255) < 1e-12


def test_from_channels_does_not_clamp():
    c = from_channels(510, -255, 0)
    assert c.rgb == (2.0, -1.0, 0.0)


def test_three_channels_get_opaque_alpha():
    assert Color((0.2, 0.4, 0.6)).value == (0.2, 0.4, 0.6, 1.0)


def test_wrong_channel_count_rejected():
    with pytest.raises(ValueError):
        Color((0.1, 0.2))
    with pytest.raises(ValueError):
        Color(np.zeros((2, 4)))


def test_color_is_immutable():
    c = Color((0.1, 0.2, 0.3, 1.0))
    with pytest.raises(AttributeError):
        c._value = (0, 0, 0, 0)
    with pytest.raises(AttributeError):
        c.extra = 1


def test_equality_and_hash():
    a = Color((1.0, 0.5, 0.0))
    b = Color(np.array([1.0, 0.5, 0.0, 1.0]))
    assert a == b
    assert a == (1.0, 0.5, 0.0, 1.0)
    assert len({a, b}) == 1


def test_conversions():
    c = from_channels(255, 128, 0)
    arr = c.as_array()
    assert arr.dtype == np.float32
    assert arr.shape == (4,)
    assert c.to_int() == (255, 128, 0, 255)
    r, g, b, a = c
    assert (r, g, b, a) == c.value


def test_opaque_forces_alpha():
    c = Color((0.3, 0.3, 0.3, 0.25))
    assert not c.is_opaque
    assert c.opaque().value == (0.3, 0.3, 0.3, 1.0)
    assert palette.RED.opaque() is palette.RED


def test_palette_is_opaque():
    for c in (palette.RED, palette.GREEN, palette.BLUE, palette.ORANGE,
              *palette.ITALY, *palette.GERMANY, *palette.JAPAN, *palette.RAINBOW):
        assert c.alpha == 1.0


def test_channel_count_follows_class():
    assert Color.num_channels == 4
    assert len(Color((0.1, 0.2, 0.3))) == Color.num_channels
    with pytest.raises(ValueError, match="3 or 4 channels"):
        Color((0.1, 0.2, 0.3, 0.4, 0.5))
