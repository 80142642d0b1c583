"""Four-component tuples used as points, vectors and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 1e-4

VECTOR_W = 0.0
POINT_W = 1.0
COLOR_W = 0.0


def are_equal(n1: float, n2: float) -> bool:
    """Compare the magnitudes of two numbers within EPSILON."""
    return abs(abs(n1) - abs(n2)) <= EPSILON


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, eq=False)
class Tuple:
    """An (x, y, z, w) tuple; w is 1 for points and 0 for vectors and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Tuple:
        return Tuple() - self

    def __mul__(self, other: object) -> Tuple:
        if isinstance(other, Tuple):
            return Tuple(*(a * b for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return Tuple(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self, other: object) -> Tuple:
        if isinstance(other, (int, float)):
            return Tuple(*(a * other for a in self))
        return NotImplemented

    def __truediv__(self, other: object) -> Tuple:
        if isinstance(other, (int, float)):
            return Tuple(*(a / other for a in self))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all(are_equal(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "(" + ", ".join(_fmt(v) for v in self) + ")"

    def magnitude(self) -> float:
        """Length of the x, y, z part."""
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def normalize(self) -> Tuple:
        """Divide every component by the magnitude."""
        mag = self.magnitude()
        return Tuple(self.x / mag, self.y / mag, self.z / mag, self.w / mag)


def vec(x: float, y: float, z: float) -> Tuple:
    """Create a vector."""
    return Tuple(x, y, z, VECTOR_W)


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point."""
    return Tuple(x, y, z, POINT_W)


def color(red: float, green: float, blue: float) -> Tuple:
    """Create a colour."""
    return Tuple(red, green, blue, COLOR_W)


def dot(a: Tuple, b: Tuple) -> float:
    """Dot product over all four components."""
    return sum(p * q for p, q in zip(a, b))


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Cross product of the x, y, z parts; the result is a vector."""
    return Tuple(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
        0.0,
    )