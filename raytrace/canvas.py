"""A pixel canvas with PPM output, and helpers for packed RGB colours."""

from __future__ import annotations

import math
import os

from .tuples import Tuple, color

COLOR_MAX = 255
COLOR_MIN = 0


def channel_to_rgb(value: float) -> int:
    """Map a colour channel in [0, 1] to 0..255, clamping and rounding up."""
    if value < 0:
        return COLOR_MIN
    if value > 1:
        return COLOR_MAX
    return math.ceil(value * COLOR_MAX)


def make_color(colour: Tuple) -> int:
    """Pack a colour into a 0xRRGGBB integer."""
    r = channel_to_rgb(colour.x)
    g = channel_to_rgb(colour.y)
    b = channel_to_rgb(colour.z)
    return r << 16 | g << 8 | b


def rgb_to_unit(value: int) -> float:
    """Map a channel value in 0..255 to [0, 1]."""
    return value / COLOR_MAX


def red(pixel: int) -> int:
    """Red channel of a packed pixel."""
    return (pixel >> 16) & 0xFF


def green(pixel: int) -> int:
    """Green channel of a packed pixel."""
    return (pixel >> 8) & 0xFF


def blue(pixel: int) -> int:
    """Blue channel of a packed pixel."""
    return pixel & 0xFF


def black() -> Tuple:
    return color(0, 0, 0)


def white() -> Tuple:
    return color(1, 1, 1)


def pixel_to_color(pixel: int) -> Tuple:
    """Unpack a 0xRRGGBB integer into a colour with channels in [0, 1]."""
    return color(rgb_to_unit(red(pixel)), rgb_to_unit(green(pixel)), rgb_to_unit(blue(pixel)))


def rgb_to_color(colour: Tuple) -> Tuple:
    """Turn a colour given in 0..255 channels into one in [0, 1]."""
    return color(rgb_to_unit(colour.x), rgb_to_unit(colour.y), rgb_to_unit(colour.z))


class Canvas:
    """A width x height grid of packed RGB pixels, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Canvas dimensions must not be negative.")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return y * self.width + x

    def pixel_at(self, x: int, y: int) -> int:
        """The packed colour of the pixel at column x, row y."""
        return self._pixels[self._index(x, y)]

    def write_pixel(self, x: int, y: int, colour: Tuple) -> None:
        """Store a colour at column x, row y."""
        self._pixels[self._index(x, y)] = make_color(colour)

    def to_ppm(self) -> str:
        """The canvas as a plain (P3) PPM document."""
        lines = ["P3", f"{self.width} {self.height}", str(COLOR_MAX)]
        for y in range(self.height):
            row = self._pixels[y * self.width : (y + 1) * self.width]
            lines.append(" ".join(f"{red(p)} {green(p)} {blue(p)}" for p in row))
        return "\n".join(lines) + "\n"

    def save_ppm(self, path: str | os.PathLike[str]) -> None:
        """Write the canvas to a PPM file."""
        with open(path, "w", encoding="ascii", newline="\n") as handle:
            handle.write(self.to_ppm())