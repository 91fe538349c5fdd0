"""Render every built-in kernel to a PNG.

Run directly with:
    python examples/kernel_gallery.py [output_dir]
"""
import os
import sys

from chromashade import (
    ColorArray,
    bind,
    bounds_for,
    from_channels,
    palette,
    setup_default_logging,
    shade,
    to_image,
)

WIDTH, HEIGHT = 300, 200


def bound_kernels():
    bounds = bounds_for(WIDTH, HEIGHT)
    return {
        "fill_orange": bind("fillOrangeColor"),
        "fill_red": bind("fillRedColor"),
        "fill_green": bind("fillGreenColor"),
        "fill_blue": bind("fillBlueColor"),
        "custom_color": bind("fillColor", from_channels(255, 204, 0)),
        "blend": bind("colorBlend", palette.RED, from_channels(255, 204, 0)),
        "stripes": bind("Stripes", 20.0, ColorArray(palette.RAINBOW)),
        "italy": bind("italyFlag", bounds),
        "germany": bind("germanyFlag", bounds),
        "japan": bind("japanFlag", bounds),
    }


def main(output_dir: str = "gallery") -> None:
    setup_default_logging()
    os.makedirs(output_dir, exist_ok=True)
    for name, bound in bound_kernels().items():
        path = os.path.join(output_dir, f"{name}.png")
        to_image(shade(bound, WIDTH, HEIGHT)).save(path)
        print(f"{bound.name:>18} -> {path}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
