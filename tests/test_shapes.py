import math

import pytest

from raytrace.canvas import black, white
from raytrace.matrix import identity, scaling, translation
from raytrace.patterns import Checker, Gradient, Ring, Stripe
from raytrace.rays import Ray
from raytrace.shapes import Material, Plane, Sphere
from raytrace.tuples import color, point, vec

R3 = math.sqrt(3) / 3


def test_ray_intersects_sphere_at_two_points():
    xs = Sphere().intersect(Ray(point(0, 0, -5), vec(0, 0, 1)))
    assert [i.t for i in xs] == pytest.approx([4.0, 6.0])


def test_ray_intersects_sphere_at_tangent():
    xs = Sphere().intersect(Ray(point(0, 1, -5), vec(0, 0, 1)))
    assert [i.t for i in xs] == pytest.approx([5.0, 5.0])


def test_ray_misses_sphere():
    assert Sphere().intersect(Ray(point(0, 2, -5), vec(0, 0, 1))) == []


def test_ray_originates_inside_sphere():
    xs = Sphere().intersect(Ray(point(0, 0, 0), vec(0, 0, 1)))
    assert [i.t for i in xs] == pytest.approx([-1.0, 1.0])


def test_sphere_behind_ray():
    xs = Sphere().intersect(Ray(point(0, 0, 5), vec(0, 0, 1)))
    assert [i.t for i in xs] == pytest.approx([-6.0, -4.0])


def test_intersect_sets_object():
    s = Sphere()
    xs = s.intersect(Ray(point(0, 0, -5), vec(0, 0, 1)))
    assert len(xs) == 2
    assert xs[0].shape is s and xs[1].shape is s


def test_sphere_default_transform():
    assert Sphere().transform == identity()


def test_changing_sphere_transform():
    s = Sphere()
    t = translation(2, 3, 4)
    s.transform = t
    assert s.transform == t


def test_intersecting_scaled_sphere():
    s = Sphere(transform=scaling(2, 2, 2))
    xs = s.intersect(Ray(point(0, 0, -5), vec(0, 0, 1)))
    assert [i.t for i in xs] == pytest.approx([3.0, 7.0])


def test_intersecting_translated_sphere():
    s = Sphere(transform=translation(5, 0, 0))
    assert s.intersect(Ray(point(0, 0, -5), vec(0, 0, 1))) == []


@pytest.mark.parametrize(
    "p, expected",
    [
        (point(1, 0, 0), vec(1, 0, 0)),
        (point(0, 1, 0), vec(0, 1, 0)),
        (point(0, 0, 1), vec(0, 0, 1)),
        (point(R3, R3, R3), vec(R3, R3, R3)),
    ],
)
def test_sphere_normals(p, expected):
    assert Sphere().normal_at(p) == expected


def test_normal_is_normalized():
    n = Sphere().normal_at(point(R3, R3, R3))
    assert n == n.normalize()


def test_normal_on_translated_sphere():
    s = Sphere(transform=identity().translate(0, 1, 0))
    assert s.normal_at(point(0, 1.70711, -0.70711)) == vec(0, 0.70711, -0.70711)


def test_normal_on_transformed_sphere():
    s = Sphere(transform=identity().rotate_z(math.pi / 5).scale(1, 0.5, 1))
    n = s.normal_at(point(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
    assert n == vec(0, 0.97014, -0.24254)


def test_default_material():
    m = Material()
    assert m.ambient == 0.1
    assert m.colour == color(1, 1, 1)
    assert m.diffuse == 0.9
    assert m.specular == 0.9
    assert m.shininess == 200.0


def test_sphere_has_default_material():
    assert Sphere().material == Material()


def test_sphere_may_be_assigned_material():
    s = Sphere()
    m = Material(ambient=1)
    s.material = m
    assert s.material.ambient == 1


def test_shape_equality_depends_on_transform():
    assert Sphere() == Sphere()
    assert not (Sphere() == Sphere(transform=translation(1, 0, 0)))


def test_plane_normal_is_constant():
    p = Plane()
    for q in (point(0, 0, 0), point(10, 0, -10), point(-5, 0, 150)):
        assert p.normal_at(q) == vec(0, 1, 0)


def test_ray_parallel_to_plane():
    assert Plane().intersect(Ray(point(0, 10, 0), vec(0, 0, 1))) == []


def test_ray_coplanar_with_plane():
    assert Plane().intersect(Ray(point(0, 0, 0), vec(0, 0, 1))) == []


def test_ray_intersecting_plane_from_above():
    p = Plane()
    xs = p.intersect(Ray(point(0, 1, 0), vec(0, -1, 0)))
    assert len(xs) == 1
    assert xs[0].shape is p


def test_ray_intersecting_plane_from_below():
    p = Plane()
    xs = p.intersect(Ray(point(0, -1, 0), vec(0, 1, 0)))
    assert len(xs) == 1
    assert xs[0].shape is p


def test_stripes_with_object_transformation():
    s = Sphere(transform=scaling(2, 2, 2), material=Material(pattern=Stripe(white(), black())))
    assert s.pattern_at(point(1.5, 0, 0)) == white()


def test_stripes_with_pattern_transformation():
    pattern = Stripe(white(), black())
    pattern.transform = scaling(2, 2, 2)
    s = Sphere(material=Material(pattern=pattern))
    assert s.pattern_at(point(1.5, 0, 0)) == white()


def test_stripes_with_both_transformations():
    pattern = Stripe(white(), black())
    pattern.transform = translation(0.5, 0, 0)
    s = Sphere(transform=scaling(2, 2, 2), material=Material(pattern=pattern))
    assert s.pattern_at(point(2.5, 0, 0)) == white()


def test_gradient_interpolates():
    s = Sphere(material=Material(pattern=Gradient(white(), black())))
    assert s.pattern_at(point(0, 0, 0)) == white()
    assert s.pattern_at(point(0.25, 0, 0)) == color(0.75, 0.75, 0.75)
    assert s.pattern_at(point(0.5, 0, 0)) == color(0.5, 0.5, 0.5)
    assert s.pattern_at(point(0.75, 0, 0)) == color(0.25, 0.25, 0.25)


def test_ring_extends_in_x_and_z():
    s = Sphere(material=Material(pattern=Ring(white(), black())))
    assert s.pattern_at(point(0, 0, 0)) == white()
    assert s.pattern_at(point(1, 0, 0)) == black()
    assert s.pattern_at(point(0, 0, 1)) == black()
    assert s.pattern_at(point(0.708, 0, 0.708)) == black()


@pytest.mark.parametrize(
    "near, far",
    [
        (point(0.99, 0, 0), point(1.01, 0, 0)),
        (point(0, 0.99, 0), point(0, 1.01, 0)),
        (point(0, 0, 0.99), point(0, 0, 1.01)),
    ],
)
def test_checkers_repeat(near, far):
    s = Sphere(material=Material(pattern=Checker(white(), black())))
    assert s.pattern_at(point(0, 0, 0)) == white()
    assert s.pattern_at(near) == white()
    assert s.pattern_at(far) == black()


def test_pattern_at_without_pattern_raises():
    with pytest.raises(ValueError):
        Sphere().pattern_at(point(0, 0, 0))