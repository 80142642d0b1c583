"""A scene of shapes and a light, and the shading of rays through it."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain

from .canvas import black
from .lights import PointLight, lighting
from .matrix import Matrix, identity, translation
from .rays import Intersection, Ray, hit
from .shapes import Material, Shape, Sphere
from .tuples import EPSILON, Tuple, color, cross, dot, point


def _unlit() -> PointLight:
    return PointLight(Tuple(), Tuple())


@dataclass
class World:
    """A collection of shapes lit by a single point light."""

    shapes: list[Shape] = field(default_factory=list)
    light: PointLight = field(default_factory=_unlit)

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Every intersection of the ray with every shape, sorted by t."""
        return sorted(
            chain.from_iterable(shape.intersect(ray) for shape in self.shapes),
            key=lambda i: i.t,
        )

    def is_shadowed(self, point: Tuple) -> bool:
        """Whether a shape lies between the point and the light."""
        v = self.light.position - point
        distance = v.magnitude()
        found = hit(self.intersect(Ray(point, v.normalize())))
        return found is not None and found.t < distance


def default_world() -> World:
    """Two concentric spheres lit from the upper left front."""
    outer = Sphere(material=Material(colour=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=identity().scale(0.5, 0.5, 0.5))
    return World(
        shapes=[outer, inner],
        light=PointLight(point(-10, 10, -10), color(1, 1, 1)),
    )


@dataclass
class Computations:
    """Values about an intersection that shading needs."""

    t: float
    shape: Shape
    point: Tuple
    over_point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    """Work out the hit point, eye and normal vectors for an intersection."""
    t = intersection.t
    shape = intersection.shape
    hit_point = ray.position(t)
    normalv = shape.normal_at(hit_point)
    eyev = -ray.direction
    inside = dot(normalv, eyev) < 0
    if inside:
        normalv = -normalv
    return Computations(
        t=t,
        shape=shape,
        point=hit_point,
        over_point=hit_point + normalv * EPSILON,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
    )


def shade_hit(world: World, comps: Computations) -> Tuple:
    """The colour at a prepared intersection, taking shadows into account."""
    return lighting(
        comps.shape,
        world.light,
        comps.over_point,
        comps.eyev,
        comps.normalv,
        world.is_shadowed(comps.over_point),
    )


def color_at(world: World, ray: Ray) -> Tuple:
    """The colour seen along a ray; black where it hits nothing."""
    found = hit(world.intersect(ray))
    if found is None:
        return black()
    return shade_hit(world, prepare_computations(found, ray))


def view_transformation(origin: Tuple, to: Tuple, up: Tuple) -> Matrix:
    """The transform that places an eye at origin looking towards to."""
    forward = (to - origin).normalize()
    left = cross(forward, up.normalize())
    true_up = cross(left, forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0],
            [true_up.x, true_up.y, true_up.z, 0],
            [-forward.x, -forward.y, -forward.z, 0],
            [0, 0, 0, 1],
        ]
    )
    return orientation * translation(-origin.x, -origin.y, -origin.z)