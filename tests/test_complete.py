import math

import pytest

from hypergeo.errors import InsufficientData, InvalidTriangle, TooManyInputs
from hypergeo.triangle import COMPLETION_RULES, TriangleState, complete_triangle, solve_triangle
from hypergeo.triangle.rules import (
    apply_cosine_pattern,
    derive_sides_from_angles,
    propagate_by_sine_rule,
)

RAD = math.radians


@pytest.fixture(scope="module")
def reference():
    return solve_triangle(A=RAD(30), B=RAD(40), C=RAD(50))


def _assert_same_triangle(left, right, tol=1e-9):
    for x, y in zip(left.as_tuple(), right.as_tuple()):
        assert math.isclose(x, y, rel_tol=tol, abs_tol=tol)


def test_angles_only_determine_sides(reference):
    assert reference.is_complete()
    assert reference.angle_sum() < math.pi
    cos_a = (math.cos(reference.B) * math.cos(reference.C) + math.cos(reference.A)) / (
        math.sin(reference.B) * math.sin(reference.C)
    )
    assert math.isclose(math.cosh(reference.a), cos_a, rel_tol=1e-12)


@pytest.mark.parametrize(
    "known",
    [
        ("a", "b", "c"),
        ("A", "b", "c"),
        ("B", "a", "c"),
        ("C", "a", "b"),
        ("A", "c", "B"),
        ("A", "b", "C"),
        ("B", "a", "C"),
    ],
)
def test_completion_agrees_across_input_sets(reference, known):
    inputs = {slot: getattr(reference, slot) for slot in known}

    solved = solve_triangle(**inputs)

    _assert_same_triangle(solved, reference)


def test_right_triangle_satisfies_pythagorean_law():
    solved = solve_triangle(C=math.pi / 2, a=1.0, b=1.0)

    assert math.isclose(math.cosh(solved.c), math.cosh(1.0) ** 2, rel_tol=1e-12)
    assert math.isclose(solved.A, solved.B, rel_tol=1e-12)
    assert solved.angle_sum() < math.pi


def test_two_sides_close_with_maximal_angle():
    solved = solve_triangle(b=1.0, c=1.0)

    assert solved.is_complete()
    assert math.isclose(solved.A, math.acos(math.tanh(0.5) ** 2), rel_tol=1e-12)
    assert math.isclose(solved.B, solved.C, rel_tol=1e-9)
    assert solved.angle_sum() < math.pi


def test_zero_means_unknown():
    state = TriangleState.from_values(0, 1.0, 0, 0, RAD(90), None)

    assert state.known_mask() == {"A": False, "a": True, "B": False, "b": False, "C": True, "c": False}
    assert state.as_tuple() == (0.0, 1.0, 0.0, 0.0, RAD(90), 0.0)


def test_angle_and_opposite_side_with_second_angle_is_insufficient():
    with pytest.raises(InsufficientData):
        solve_triangle(A=RAD(30), a=1.0, B=RAD(40))


@pytest.mark.parametrize(
    "inputs, error",
    [
        ({"A": 0.1, "a": 1.0, "B": 0.2, "b": 1.0}, TooManyInputs),
        ({"A": 0.5}, InsufficientData),
        ({}, InsufficientData),
        ({"A": -0.5, "b": 1.0, "c": 1.0}, InvalidTriangle),
        ({"A": 0.5, "b": -1.0, "c": 1.0}, InvalidTriangle),
        ({"A": math.pi, "b": 1.0}, InvalidTriangle),
        ({"A": RAD(100), "B": RAD(90)}, InvalidTriangle),
        ({"a": 1.0, "b": 1.0, "c": 3.0}, InvalidTriangle),
    ],
)
def test_invalid_inputs_are_rejected(inputs, error):
    with pytest.raises(error):
        solve_triangle(**inputs)


def test_inconsistent_sine_ratio_is_rejected():
    with pytest.raises(InvalidTriangle):
        solve_triangle(A=RAD(30), a=0.1, b=5.0)


def test_completion_rule_order():
    assert [name for name, _ in COMPLETION_RULES] == [
        "sine-rule",
        "right-angle",
        "cosine-pattern",
        "angles-from-sides",
        "sine-rule",
        "sides-from-angles",
        "maximum-angle",
        "sine-rule",
    ]


def test_rules_report_no_change_with_none():
    state = TriangleState(A=0.5, b=1.0, c=1.0)

    assert propagate_by_sine_rule(state) is None
    assert derive_sides_from_angles(state) is None


def test_cosine_pattern_fills_angle_between_known_pair():
    state = TriangleState(A=RAD(30), c=1.0, B=RAD(40))

    updated = apply_cosine_pattern(state)

    assert updated is not None
    assert updated.known("C")
    assert complete_triangle(state).is_complete()


def test_state_groups_angles_and_sides_by_slot():
    state = TriangleState(A=0.1, a=1.0, B=0.2, c=3.0)

    assert state.angles() == (0.1, 0.2, None)
    assert state.sides() == (1.0, None, 3.0)
    assert state.angle_sum() == pytest.approx(0.3)
