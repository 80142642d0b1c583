"""Colour patterns that map a point in pattern space to a colour."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .matrix import Matrix, identity
from .tuples import EPSILON, Tuple


class Pattern(ABC):
    """A two-colour pattern with its own transform."""

    def __init__(self, colour_one: Tuple, colour_two: Tuple, transform: Matrix | None = None) -> None:
        self.colour_one = colour_one
        self.colour_two = colour_two
        self.transform = transform if transform is not None else identity()

    @abstractmethod
    def pattern_at(self, point: Tuple) -> Tuple:
        """The colour at a point given in pattern space."""


class Stripe(Pattern):
    """Alternating stripes along x."""

    def pattern_at(self, point: Tuple) -> Tuple:
        if math.floor(point.x) % 2 == 0:
            return self.colour_one
        return self.colour_two


class Gradient(Pattern):
    """A linear blend from the first colour to the second over each unit of x."""

    def pattern_at(self, point: Tuple) -> Tuple:
        distance = self.colour_two - self.colour_one
        fraction = point.x - math.floor(point.x)
        return self.colour_one + distance * fraction


class Ring(Pattern):
    """Concentric rings in the x-z plane."""

    def pattern_at(self, point: Tuple) -> Tuple:
        if math.floor(math.hypot(point.x, point.z)) % 2 == 0:
            return self.colour_one
        return self.colour_two


class Checker(Pattern):
    """Three-dimensional unit cubes of alternating colour."""

    def pattern_at(self, point: Tuple) -> Tuple:
        if (math.floor(point.x) + math.floor(point.y) + math.floor(point.z)) % 2 == 0:
            return self.colour_one
        return self.colour_two


class CheckerMap(Pattern):
    """Checkers laid over a unit sphere by spherical coordinates."""

    checks_u = 8
    checks_v = 4

    def pattern_at(self, point: Tuple) -> Tuple:
        y = max(-1.0, min(1.0, point.y))
        u = (math.atan2(point.x, point.z) + math.pi) / math.pi / 2
        v = math.acos(y) / math.pi
        u = math.fmod(u + EPSILON, 1.0)
        v = min(v + EPSILON, 1.0 - EPSILON)
        iu = math.floor(u * self.checks_u)
        iv = math.floor(v * self.checks_v)
        if (iu + iv) & 1 == 0:
            return self.colour_one
        return self.colour_two