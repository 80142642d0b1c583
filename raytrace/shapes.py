"""Materials and the shapes a ray can hit: spheres and planes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .matrix import Matrix, identity
from .patterns import Pattern
from .rays import Intersection, Ray
from .tuples import EPSILON, Tuple, color, point, vec


@dataclass
class Material:
    """Surface properties for the Phong lighting model."""

    colour: Tuple = field(default_factory=lambda: color(1, 1, 1))
    pattern: Pattern | None = field(default=None, compare=False)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0


class Shape(ABC):
    """A shape with an object-to-world transform and a material."""

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else Material()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.material == other.material and self.transform == other.transform

    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of the ray with this shape."""

    @abstractmethod
    def normal_at(self, world_point: Tuple) -> Tuple:
        """The surface normal at a point given in world space."""

    def pattern_at(self, world_point: Tuple) -> Tuple:
        """The material's pattern colour at a point given in world space."""
        pattern = self.material.pattern
        if pattern is None:
            raise ValueError("the shape's material has no pattern")
        object_point = self.transform.inverse() * world_point
        pattern_point = pattern.transform.inverse() * object_point
        return pattern.pattern_at(pattern_point)

    def _normal_to_world(self, normal: Tuple) -> Tuple:
        world_normal = self.transform.transpose().inverse() * normal
        return Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0).normalize()


class Sphere(Shape):
    """A unit sphere centred on the origin of object space."""

    _origin = point(0, 0, 0)

    def intersect(self, ray: Ray) -> list[Intersection]:
        local = ray.transform(self.transform.inverse())
        sphere_to_ray = local.origin - self._origin
        d = local.direction
        a = d.x * d.x + d.y * d.y + d.z * d.z + d.w * d.w
        b = 2 * sum(p * q for p, q in zip(d, sphere_to_ray))
        c = sum(p * p for p in sphere_to_ray) - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []
        root = discriminant ** 0.5
        return [
            Intersection((-b - root) / (2 * a), self),
            Intersection((-b + root) / (2 * a), self),
        ]

    def normal_at(self, world_point: Tuple) -> Tuple:
        object_point = self.transform.inverse() * world_point
        return self._normal_to_world(object_point - self._origin)


class Plane(Shape):
    """The x-z plane of object space."""

    def intersect(self, ray: Ray) -> list[Intersection]:
        local = ray.transform(self.transform.inverse())
        if abs(local.direction.y) < EPSILON:
            return []
        return [Intersection(-local.origin.y / local.direction.y, self)]

    def normal_at(self, world_point: Tuple) -> Tuple:
        return self._normal_to_world(vec(0, 1, 0))