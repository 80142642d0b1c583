import pytest

from raytrace.canvas import black, white
from raytrace.matrix import identity, scaling
from raytrace.patterns import Checker, CheckerMap, Gradient, Pattern, Ring, Stripe
from raytrace.tuples import color, point


def test_pattern_is_abstract():
    with pytest.raises(TypeError):
        Pattern(white(), black())


def test_default_transform_is_identity():
    assert Stripe(white(), black()).transform == identity()


def test_transform_can_be_given():
    assert Stripe(white(), black(), scaling(2, 2, 2)).transform == scaling(2, 2, 2)


@pytest.mark.parametrize("p", [point(0, 0, 0), point(0, 1, 0), point(0, 2, 0)])
def test_stripe_constant_in_y(p):
    assert Stripe(white(), black()).pattern_at(p) == white()


@pytest.mark.parametrize("p", [point(0, 0, 0), point(0, 0, 1), point(0, 0, 2)])
def test_stripe_constant_in_z(p):
    assert Stripe(white(), black()).pattern_at(p) == white()


@pytest.mark.parametrize(
    "x, expected",
    [(0, white()), (0.9, white()), (1, black()), (-0.1, black()), (-1, black()), (-1.1, white())],
)
def test_stripe_alternates_in_x(x, expected):
    assert Stripe(white(), black()).pattern_at(point(x, 0, 0)) == expected


@pytest.mark.parametrize(
    "x, expected",
    [
        (0, white()),
        (0.25, color(0.75, 0.75, 0.75)),
        (0.5, color(0.5, 0.5, 0.5)),
        (0.75, color(0.25, 0.25, 0.25)),
    ],
)
def test_gradient_interpolates(x, expected):
    assert Gradient(white(), black()).pattern_at(point(x, 0, 0)) == expected


@pytest.mark.parametrize(
    "p, expected",
    [
        (point(0, 0, 0), white()),
        (point(1, 0, 0), black()),
        (point(0, 0, 1), black()),
        (point(0.708, 0, 0.708), black()),
    ],
)
def test_ring_extends_in_x_and_z(p, expected):
    assert Ring(white(), black()).pattern_at(p) == expected


@pytest.mark.parametrize(
    "p, expected",
    [
        (point(0, 0, 0), white()),
        (point(0.99, 0, 0), white()),
        (point(1.01, 0, 0), black()),
        (point(0, 0.99, 0), white()),
        (point(0, 1.01, 0), black()),
        (point(0, 0, 0.99), white()),
        (point(0, 0, 1.01), black()),
    ],
)
def test_checkers_repeat(p, expected):
    assert Checker(white(), black()).pattern_at(p) == expected


def test_checker_map_poles():
    pattern = CheckerMap(white(), black())
    assert pattern.pattern_at(point(0, 1, 0)) == white()
    assert pattern.pattern_at(point(0, -1, 0)) == black()


@pytest.mark.parametrize(
    "p", [point(0.3, 0.2, -0.9), point(-0.7, 0.1, 0.7), point(0, 0, 1), point(1, 0, 0)]
)
def test_checker_map_returns_one_of_its_colours(p):
    one, two = color(0.5, 0, 0.7), white()
    assert CheckerMap(one, two).pattern_at(p) in (one, two)