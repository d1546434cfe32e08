"""Basic chromaramp usage examples.

Run directly with:
    python examples/basic_usage.py [output_dir]
"""
import os
import sys

from PIL import Image

from chromaramp import Gradient, GradientBuilder, hsla
from chromaramp.samples import RAINBOW_STOPS, RED_GLOW_STOPS
from chromaramp.types import ChannelOrder, Side

WIDTH, HEIGHT = 800, 600


def demonstrate_colors() -> None:
    # HSLA channels are unit floats; rgba8 truncates to bytes.
    teal = hsla(0.5, 0.6, 0.4)
    print("teal as RGBA8:", teal.to_rgba8())
    print("teal halfway to white:", teal.interpolate(hsla(0.5, 0.0, 1.0), 0.5))


def save(pixels, path: str) -> None:
    Image.fromarray(pixels).save(path)
    print("wrote", path)


def demonstrate_gradients(output_dir: str) -> None:
    rainbow = Gradient.linear(Side.RIGHT, RAINBOW_STOPS, WIDTH, HEIGHT)
    save(rainbow.render(WIDTH, HEIGHT), os.path.join(output_dir, "linear.png"))

    wheel = Gradient.conic(RAINBOW_STOPS, WIDTH, HEIGHT)
    save(wheel.render(WIDTH, HEIGHT), os.path.join(output_dir, "conic.png"))

    glow = Gradient.radial(RED_GLOW_STOPS, WIDTH, HEIGHT)
    save(glow.render(WIDTH, HEIGHT), os.path.join(output_dir, "radial.png"))

    stripes = (
        GradientBuilder.repeating_linear()
        .angle(30)
        .color_with_percentage(hsla(0.6, 0.8, 0.5), 0.0)
        .color_with_percentage(hsla(0.1, 0.9, 0.6), 0.1)
    )
    save(stripes.render_image(WIDTH, HEIGHT), os.path.join(output_dir, "stripes.png"))

    # BGRA buffers are what most window-system surfaces expect.
    bgra = rainbow.render_bytes(WIDTH, HEIGHT, ChannelOrder.BGRA)
    print("BGRA buffer size:", len(bgra))


def angle_sheet(output_path: str, columns: int = 6, rows: int = 4, cell: int = 120) -> None:
    """Contact sheet of the rainbow at evenly spaced angles."""
    canvas = Image.new("RGBA", (columns * cell, rows * cell))
    frames = columns * rows
    for frame in range(frames):
        angle = 360.0 * frame / frames
        pixels = Gradient.linear(angle, RAINBOW_STOPS, cell, cell).render(cell, cell)
        row, column = divmod(frame, columns)
        canvas.paste(Image.fromarray(pixels), (column * cell, row * cell))
    canvas.save(output_path)
    print("wrote", output_path)


if __name__ == "__main__":
    out = sys.argv[1] if len(sys.argv) > 1 else "."
    os.makedirs(out, exist_ok=True)
    demonstrate_colors()
    demonstrate_gradients(out)
    angle_sheet(os.path.join(out, "angles.png"))
