"""A pinhole camera that renders a world onto a canvas."""

from __future__ import annotations

import math

from .canvas import Canvas
from .matrix import Matrix, identity
from .rays import Ray
from .tuples import point
from .world import World, color_at


class Camera:
    """Maps a hsize x vsize canvas onto a view one unit in front of the eye."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Matrix | None = None) -> None:
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = self.half_view
            self.half_height = self.half_view / aspect
        else:
            self.half_width = self.half_view * aspect
            self.half_height = self.half_view
        self.pixel_size = (self.half_width * 2.0) / hsize
        self.transform = transform if transform is not None else identity()

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """The ray from the eye through the centre of pixel (px, py)."""
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size
        inverse = self.transform.inverse()
        pixel = inverse * point(world_x, world_y, -1)
        origin = inverse * point(0, 0, 0)
        return Ray(origin, (pixel - origin).normalize())

    def render(self, world: World) -> Canvas:
        """Trace one ray per pixel and return the resulting image."""
        image = Canvas(int(self.hsize), int(self.vsize))
        for y in range(image.height):
            for x in range(image.width):
                image.write_pixel(x, y, color_at(world, self.ray_for_pixel(x, y)))
        return image