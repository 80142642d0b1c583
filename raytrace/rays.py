"""Rays and ray-object intersections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .matrix import Matrix
from .tuples import Tuple


@dataclass(frozen=True)
class Ray:
    """A half-line from an origin point along a direction vector."""

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """The point at distance t along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """A new ray with origin and direction multiplied by the matrix."""
        return Ray(matrix * self.origin, matrix * self.direction)


@dataclass(frozen=True, eq=False)
class Intersection:
    """A distance t along a ray at which it meets a shape."""

    t: float
    shape: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.shape is other.shape

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Intersection) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t < other.t

    def __gt__(self, other: Intersection) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t > other.t


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """The intersection with the lowest non-negative t, or None."""
    return min((i for i in intersections if i.t >= 0), key=lambda i: i.t, default=None)