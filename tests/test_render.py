import logging

import numpy as np
import pytest

from chromashade import (
    Color,
    ColorArray,
    DomainError,
    Settings,
    DomainErrorPolicy,
    bind,
    bounds_for,
    from_channels,
    shade,
    to_image,
    to_uint8,
)
from chromashade.colors import palette


def test_shape_and_alpha():
    out = shade(bind("japan_flag", bounds_for(40, 30)), 40, 30)
    assert out.shape == (30, 40, 4)
    assert out.dtype == np.float32
    assert np.all(out[..., 3] == 1.0)


def test_constant_fill_covers_every_pixel():
    out = shade(bind("fill_blue_color"), 5, 4)
    assert np.allclose(out, palette.BLUE.as_array())


def test_italy_columns():
    out = shade(bind("italy_flag", bounds_for(30, 10)), 30, 10)
    green, white, red = (c.as_array() for c in palette.ITALY)
    assert np.allclose(out[:, :10], green)
    assert np.allclose(out[:, 10:20], white)
    assert np.allclose(out[:, 20:], red)


def test_stripes_rows():
    colors = ColorArray(palette.RAINBOW)
    out = shade(bind("stripes", 2.0, colors), 3, 14)
    for row in range(14):
        expected = palette.RAINBOW[(row // 2) % 6].as_array()
        assert np.allclose(out[row], expected)


def test_current_color_array_is_passed_per_pixel():
    seen = []
    from chromashade import KernelRegistry, KernelSignature

    reg = KernelRegistry()

    def passthrough(position, current_color):
        seen.append(current_color)
        return current_color

    reg.register("passthrough", KernelSignature(), passthrough)
    current = np.zeros((2, 3, 4), dtype=np.float32)
    current[..., 0] = np.arange(6).reshape(2, 3) / 10
    current[..., 3] = 1.0
    out = shade(bind("passthrough", registry=reg), 3, 2, current=current)
    assert np.allclose(out, current)
    assert all(isinstance(c, Color) for c in seen)


def test_current_color_shape_checked():
    with pytest.raises(ValueError):
        shade(bind("fill_red_color"), 3, 2, current=np.zeros((3, 3, 4)))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        shade(bind("fill_red_color"), -1, 2)


def test_empty_view():
    assert shade(bind("fill_red_color"), 0, 0).shape == (0, 0, 4)


def test_raise_policy_aborts_pass():
    bound = bind("stripes", 20.0, ColorArray([]))
    with pytest.raises(DomainError):
        shade(bound, 4, 4, settings=Settings())


def test_fallback_policy_substitutes_color(caplog):
    fallback = from_channels(0, 255, 255)
    settings = Settings(domain_error_policy=DomainErrorPolicy.FALLBACK, fallback_color=fallback)
    bound = bind("stripes", 20.0, ColorArray([]))
    with caplog.at_level(logging.WARNING, logger="chromashade.render"):
        out = shade(bound, 3, 2, settings=settings)
    assert np.allclose(out, fallback.as_array())
    assert "fallback" in caplog.text


def test_fallback_from_environment(env_settings):
    env_settings(domain_error_policy="fallback", fallback_color="255,0,0")
    out = shade(bind("italy_flag", bounds_for(0, 5)), 2, 2)
    assert np.allclose(out, palette.RED.as_array())


def test_to_uint8_and_image():
    out = shade(bind("color_blend", palette.BLACK, palette.WHITE), 4, 3)
    img8 = to_uint8(out)
    assert img8.dtype == np.uint8
    assert np.all(img8[..., :3] == 128)
    assert np.all(img8[..., 3] == 255)

    img = to_image(out)
    assert img.size == (4, 3)
    assert img.mode == "RGBA"
    assert img.getpixel((0, 0)) == (128, 128, 128, 255)


def test_translucent_fill_renders_opaque():
    out = shade(bind("fill_color", Color((1.0, 0.0, 0.0, 0.25))), 2, 2)
    assert np.all(out[..., 3] == 1.0)
    assert np.allclose(out[..., 0], 1.0)
