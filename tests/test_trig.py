import math

import pytest

from hypergeo.errors import OutOfDomain
from hypergeo.trig import (
    acosh,
    angle_of_parallelism,
    asinh,
    degrees_to_radians,
    disk_half_plane_convert,
    poincare_gyrovector_convert,
    radians_to_degrees,
    triangle_area,
)


@pytest.mark.parametrize("x", [0.0, 0.5, -2.0, 10.0])
def test_asinh_matches_math(x):
    assert math.isclose(asinh(x), math.asinh(x), rel_tol=1e-12, abs_tol=1e-15)


def test_acosh_outside_domain_is_nan():
    assert math.isnan(acosh(0.5))
    assert acosh(1.0) == 0.0
    assert math.isclose(acosh(3.0), math.acosh(3.0), rel_tol=1e-12)


@pytest.mark.parametrize("value", [0.0, 1.0, -2.5, math.pi, 1e6])
def test_degree_conversions_are_inverse(value):
    assert math.isclose(degrees_to_radians(radians_to_degrees(value)), value, rel_tol=1e-12)
    assert math.isclose(degrees_to_radians(180.0), math.pi)


def test_gyrovector_from_poincare_radius():
    r, rg = poincare_gyrovector_convert(0.5, 0)

    assert r == 0.5
    assert math.isclose(rg, math.log(3.0))

    back, _ = poincare_gyrovector_convert(0, rg)
    assert math.isclose(back, 0.5, rel_tol=1e-12)


def test_gyrovector_convert_passes_through_when_not_exactly_one_given():
    assert poincare_gyrovector_convert(0.3, 0.2) == (0.3, 0.2)
    assert poincare_gyrovector_convert(0, 0) == (0, 0)


def test_half_plane_from_center_height_and_radius():
    params = disk_half_plane_convert(x=2.0, y=5.0, r=3.0)

    assert params.xg == 2.0
    assert math.isclose(params.yg, 4.0)
    assert math.isclose(params.rg, math.log(2.0))
    assert math.isclose(params.l, 6.0 * math.pi)
    assert math.isclose(params.lg, 1.5 * math.pi)


def test_half_plane_from_hyperbolic_center_and_radius():
    params = disk_half_plane_convert(yg=4.0, rg=math.log(2.0))

    assert math.isclose(params.r, 3.0)
    assert math.isclose(params.y, 5.0)


def test_half_plane_first_pairing_wins():
    params = disk_half_plane_convert(y=5.0, r=3.0, yg=10.0)

    assert math.isclose(params.yg, 4.0)


def test_half_plane_circumferences_use_hyperbolic_length():
    params = disk_half_plane_convert(l=6.0 * math.pi, lg=1.5 * math.pi)

    assert math.isclose(params.r, 3.0)
    assert math.isclose(params.rg, math.log(2.0))
    assert math.isclose(params.yg, 4.0)
    assert math.isclose(params.y, 5.0)


@pytest.mark.parametrize(
    "params",
    [
        {"y": 1.0, "r": 2.0},
        {"y": 2.0, "r": 2.0},
        {"y": 1.0, "l": 4.0 * math.pi},
        {"r": 1.0, "rg": 1e-9},
        {"l": 2.0 * math.pi, "lg": 1e-9},
    ],
)
def test_half_plane_rejects_circles_below_the_axis(params):
    with pytest.raises(OutOfDomain):
        disk_half_plane_convert(**params)


def test_half_plane_without_pairing_is_unchanged():
    params = disk_half_plane_convert(y=5.0)

    assert tuple(params) == (0.0, 5.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def test_triangle_area_is_angle_defect():
    third = math.pi / 6.0
    assert math.isclose(triangle_area(third, third, third), math.pi / 2.0)
    assert math.isclose(triangle_area(third, third, third, k=2.0), 2.0 * math.pi)


def test_angle_of_parallelism():
    assert math.isclose(angle_of_parallelism(0.0), math.pi / 2.0)
    assert angle_of_parallelism(5.0) < angle_of_parallelism(1.0) < math.pi / 2.0
