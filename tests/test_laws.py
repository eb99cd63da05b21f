import math

import pytest

from hypergeo.errors import InvalidTriangle
from hypergeo.triangle import (
    first_cosine_rule,
    maximum_angle_and_side,
    pythagorean,
    second_cosine_rule,
    sine_rule,
)


def _triangle_from_angles(A, B, C):
    a, _, _, _ = second_cosine_rule(None, A, B, C)
    b, _, _, _ = second_cosine_rule(None, B, A, C)
    c, _, _, _ = second_cosine_rule(None, C, A, B)
    return A, a, B, b, C, c


def test_pythagorean_fills_hypotenuse_and_legs():
    _, _, hyp = pythagorean(1.0, 1.0, None)
    assert math.isclose(math.cosh(hyp), math.cosh(1.0) ** 2)

    _, leg, _ = pythagorean(1.0, None, hyp)
    assert math.isclose(leg, 1.0, rel_tol=1e-12)

    leg, _, _ = pythagorean(None, 1.0, hyp)
    assert math.isclose(leg, 1.0, rel_tol=1e-12)


def test_pythagorean_rejects_hypotenuse_shorter_than_leg():
    with pytest.raises(InvalidTriangle):
        pythagorean(2.0, None, 1.0)


def test_sine_rule_without_complete_pair_is_unchanged():
    values = (0.5, None, None, 1.0, 0.3, None)
    assert sine_rule(*values) == values


def test_sine_rule_fills_from_first_complete_pair():
    A, a, B, b, C, c = _triangle_from_angles(math.radians(30), math.radians(40), math.radians(50))

    filled = sine_rule(A, a, B, None, None, c)

    assert math.isclose(filled[3], b, rel_tol=1e-9)
    assert math.isclose(filled[4], C, rel_tol=1e-9)


def test_sine_rule_rejects_impossible_ratio():
    with pytest.raises(InvalidTriangle):
        sine_rule(math.radians(30), 0.1, None, 5.0, None, None)


def test_first_cosine_rule_equilateral_angle():
    A, a, b, c = first_cosine_rule(None, 1.0, 1.0, 1.0)

    cosh1 = math.cosh(1.0)
    assert math.isclose(A, math.acos(cosh1 / (cosh1 + 1.0)), rel_tol=1e-12)

    _, side, _, _ = first_cosine_rule(A, None, b, c)
    assert math.isclose(side, 1.0, rel_tol=1e-9)


def test_first_cosine_rule_needs_both_adjacent_sides():
    assert first_cosine_rule(0.5, None, 1.0, None) == (0.5, None, 1.0, None)


def test_first_cosine_rule_rejects_long_opposite_side():
    with pytest.raises(InvalidTriangle):
        first_cosine_rule(None, 5.0, 1.0, 1.0)


def test_second_cosine_rule_round_trip():
    A, B, C = math.radians(30), math.radians(10), math.radians(120)

    a, _, _, _ = second_cosine_rule(None, A, B, C)
    _, angle, _, _ = second_cosine_rule(a, None, B, C)

    assert math.isclose(angle, A, rel_tol=1e-9)


def test_second_cosine_rule_rejects_cosine_out_of_range():
    with pytest.raises(InvalidTriangle):
        second_cosine_rule(5.0, None, math.pi / 3, math.pi / 3)


def test_maximum_angle_and_side():
    A, a, b, c = maximum_angle_and_side(None, None, 1.0, 1.0)

    assert math.isclose(A, math.acos(math.tanh(0.5) ** 2))
    assert math.isclose(a, 2.0 * math.asinh(math.sqrt(2.0) * math.sinh(0.5)))
    assert (b, c) == (1.0, 1.0)
