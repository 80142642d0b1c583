"""Point lights and Phong shading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .canvas import black
from .tuples import EPSILON, Tuple, dot

if TYPE_CHECKING:
    from .shapes import Shape


@dataclass
class PointLight:
    """A light with no size at a position, with an intensity colour."""

    position: Tuple
    intensity: Tuple


def reflect(incoming: Tuple, normal: Tuple) -> Tuple:
    """Reflect a vector about a normal."""
    return incoming - normal * 2 * dot(incoming, normal)


def lighting(
    shape: Shape,
    light: PointLight,
    point: Tuple,
    eyev: Tuple,
    normalv: Tuple,
    in_shadow: bool,
) -> Tuple:
    """The Phong colour of a shape's surface at a point."""
    material = shape.material
    if material.pattern is not None:
        effective = shape.pattern_at(point) * light.intensity
    else:
        effective = material.colour * light.intensity

    light_vector = (light.position - point).normalize()
    ambient = effective * material.ambient
    diffuse = black()
    specular = black()

    light_dot_normal = dot(light_vector, normalv)
    if light_dot_normal >= EPSILON and not in_shadow:
        diffuse = effective * material.diffuse * light_dot_normal
        reflect_dot_eye = dot(reflect(-light_vector, normalv), eyev)
        if reflect_dot_eye > EPSILON:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor
    return ambient + diffuse + specular