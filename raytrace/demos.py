"""Example scenes that render to PPM files, and the command that runs them."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Callable, Sequence

from .camera import Camera
from .canvas import Canvas, rgb_to_color, white
from .lights import PointLight, lighting
from .patterns import Checker, CheckerMap, Gradient
from .rays import Ray, hit
from .shapes import Material, Plane, Shape, Sphere
from .tuples import color, point, vec
from .world import World, view_transformation

PathLike = str | os.PathLike[str]


def _render(
    path: PathLike,
    width: int,
    height: int,
    eye: tuple[float, float, float],
    target: tuple[float, float, float],
    light: PointLight,
    shapes: Sequence[Shape],
) -> Canvas:
    camera = Camera(width, height, math.pi / 3)
    camera.transform = view_transformation(point(*eye), point(*target), vec(0, 1, 0))
    world = World(shapes=list(shapes), light=light)
    image = camera.render(world)
    image.save_ppm(path)
    return image


def clock_demo(path: PathLike = "clock.ppm") -> Canvas:
    """Mark the sixty minute positions of a clock face."""
    canvas = Canvas(500, 500)
    for minute in range(60):
        mark = rotation_z_mark(minute)
        canvas.write_pixel(int(mark.x + 250), int(mark.y + 250), color(255, 255, 255))
    canvas.save_ppm(path)
    return canvas


def rotation_z_mark(minute: int):
    """The clock mark for a minute, 100 units from the centre."""
    from .matrix import rotation_z

    return rotation_z(minute * (math.pi / 30)) * point(0, 100, 0)


def sphere_demo(path: PathLike = "sphere.ppm", size: int = 500) -> Canvas:
    """Cast rays from a fixed eye through a wall behind a lit sphere."""
    canvas = Canvas(size, size)
    wall_size = 10.0
    wall_z = 7.0
    shape = Sphere(material=Material(colour=color(1, 0.2, 1)))
    origin = point(0, 0, -5)
    light = PointLight(point(-10, 10, -10), color(1, 1, 1))
    pixel_size = wall_size / canvas.height
    half = wall_size / 2

    for i in range(canvas.width):
        world_x = pixel_size * i - half
        for j in range(canvas.height):
            world_y = half - pixel_size * j
            ray = Ray(origin, (point(world_x, world_y, wall_z) - origin).normalize())
            found = hit(shape.intersect(ray))
            if found is None:
                continue
            hit_point = ray.position(found.t)
            normal = found.shape.normal_at(hit_point)
            canvas.write_pixel(
                i, j, lighting(found.shape, light, hit_point, -ray.direction, normal, False)
            )
    canvas.save_ppm(path)
    return canvas


def _wall_material() -> Material:
    return Material(colour=color(1, 0.9, 0.9), specular=0)


def _ball_material(colour) -> Material:
    return Material(colour=colour, diffuse=0.7, specular=0.3)


def spheres_demo(path: PathLike = "SpheresDemo.ppm", width: int = 1000, height: int = 500) -> Canvas:
    """Three spheres in a room whose floor and walls are flattened spheres."""
    from .matrix import identity

    floor = Sphere(transform=identity().scale(10, 0.01, 10), material=_wall_material())
    left_wall = Sphere(
        transform=identity()
        .scale(10, 0.01, 10)
        .rotate_x(math.pi / 2)
        .rotate_y(-math.pi / 4)
        .translate(0, 0, 5),
        material=_wall_material(),
    )
    right_wall = Sphere(
        transform=identity()
        .scale(10, 0.01, 10)
        .rotate_x(math.pi / 2)
        .rotate_y(math.pi / 4)
        .translate(0, 0, 5),
        material=_wall_material(),
    )
    middle = Sphere(
        transform=identity().translate(-0.5, 1, 0.5).scale(0.5, 0.5, 0.5),
        material=_ball_material(color(0.1, 1, 0.5)),
    )
    right = Sphere(
        transform=identity().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5),
        material=_ball_material(color(0.5, 1, 0.1)),
    )
    left = Sphere(
        transform=identity().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75),
        material=_ball_material(color(1, 0.8, 0.1)),
    )
    return _render(
        path,
        width,
        height,
        (0, 1.5, -5),
        (0, 1, 0),
        PointLight(point(-10, 10, -10), color(1, 1, 1)),
        [floor, right_wall, left_wall, middle, right, left],
    )


def plane_demo(path: PathLike = "PlaneDemo.ppm", width: int = 250, height: int = 250) -> Canvas:
    """A blue sphere in front of a white plane."""
    from .matrix import identity

    floor = Plane(transform=identity().rotate_x(-math.pi / 2), material=Material(colour=color(1, 1, 1)))
    ball = Sphere(material=Material(colour=color(0, 0, 1)))
    return _render(
        path,
        width,
        height,
        (0, 1, -5),
        (0, 0, 1),
        PointLight(point(-10, 5, -10), color(1, 1, 1)),
        [floor, ball],
    )


def test_demo(path: PathLike = "testDemo.ppm", width: int = 1920, height: int = 1080) -> Canvas:
    """A checkered sphere over a checkered floor, with a gradient wall."""
    from .matrix import identity, scaling

    floor_pattern = Checker(white(), rgb_to_color(color(0, 162, 232)))
    floor_pattern.transform.rotate_y(math.pi / 4)
    floor = Plane(
        transform=identity().translate(0, -1, 0),
        material=Material(colour=color(1, 1, 1), pattern=floor_pattern),
    )

    wall_pattern = Gradient(
        rgb_to_color(color(168, 166, 152)),
        rgb_to_color(color(168, 103, 156)),
        transform=scaling(30, 30, 30),
    )
    wall = Plane(
        transform=identity().rotate_x(math.pi / 4).translate(15, 20, 0),
        material=Material(pattern=wall_pattern),
    )

    ball = Sphere(
        material=Material(
            colour=color(0, 0, 1),
            pattern=CheckerMap(color(0.5, 0, 0.7), white()),
        )
    )
    return _render(
        path,
        width,
        height,
        (0, 1, -5),
        (0, 0, 0),
        PointLight(point(-10, 10, -10), color(1, 1, 1)),
        [floor, ball, wall],
    )


_DEMOS: dict[str, tuple[Callable[..., Canvas], str, tuple[int, int] | None]] = {
    "clock": (clock_demo, "clock.ppm", None),
    "sphere": (sphere_demo, "sphere.ppm", (500, 500)),
    "spheres": (spheres_demo, "SpheresDemo.ppm", (1000, 500)),
    "plane": (plane_demo, "PlaneDemo.ppm", (250, 250)),
    "test": (test_demo, "testDemo.ppm", (1920, 1080)),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Render one of the demo scenes to a PPM file."""
    parser = argparse.ArgumentParser(prog="raytrace", description="Render a demo scene to a PPM file.")
    parser.add_argument("demo", nargs="?", default="test", choices=sorted(_DEMOS))
    parser.add_argument("-o", "--output", help="file to write")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--height", type=int, help="image height in pixels")
    args = parser.parse_args(argv)

    render, default_path, default_size = _DEMOS[args.demo]
    path = args.output or default_path
    if default_size is None:
        if args.width is not None or args.height is not None:
            parser.error("the clock demo has a fixed size")
        render(path)
        return 0

    width = args.width if args.width is not None else default_size[0]
    height = args.height if args.height is not None else default_size[1]
    if width <= 0 or height <= 0:
        parser.error("width and height must be positive")
    if args.demo == "sphere":
        render(path, width)
    else:
        render(path, width, height)
    return 0