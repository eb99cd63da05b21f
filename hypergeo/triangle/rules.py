"""Named completion rules over a :class:`TriangleState`.

A rule returns the updated state, or ``None`` when it does not apply or
derives nothing new. :data:`COMPLETION_RULES` lists them in the order the
completion driver applies them.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence, Tuple

from .laws import (
    first_cosine_rule,
    maximum_angle_and_side,
    pythagorean,
    second_cosine_rule,
    sine_rule,
)
from .types import ANGLE_SLOTS, TriangleState

Rule = Callable[[TriangleState], Optional[TriangleState]]

RIGHT_ANGLE = math.pi / 2.0
_RIGHT_ANGLE_TOL = 1e-12

# right angle slot -> (leg, leg, hypotenuse)
_RIGHT_TRIANGLE_SIDES = {
    "A": ("b", "c", "a"),
    "B": ("a", "c", "b"),
    "C": ("a", "b", "c"),
}


def _changed(before: TriangleState, after: TriangleState) -> Optional[TriangleState]:
    return None if after == before else after


def propagate_by_sine_rule(state: TriangleState) -> Optional[TriangleState]:
    A, a, B, b, C, c = sine_rule(state.A, state.a, state.B, state.b, state.C, state.c)
    return _changed(state, TriangleState(A, a, B, b, C, c))


def close_right_triangle(state: TriangleState) -> Optional[TriangleState]:
    updated = state
    for angle_slot, (leg1, leg2, hyp) in _RIGHT_TRIANGLE_SIDES.items():
        angle = getattr(updated, angle_slot)
        if angle is None or not math.isclose(angle, RIGHT_ANGLE, abs_tol=_RIGHT_ANGLE_TOL):
            continue
        values = (getattr(updated, leg1), getattr(updated, leg2), getattr(updated, hyp))
        if sum(v is not None for v in values) != 2:
            continue
        x, y, h = pythagorean(*values)
        updated = updated.with_values(**{leg1: x, leg2: y, hyp: h})
    return _changed(state, updated)


# (known slots, law, argument slots in law order)
_COSINE_PATTERNS: Sequence[Tuple[Tuple[str, str, str], str, Tuple[str, str, str, str]]] = (
    (("A", "c", "B"), "second", ("c", "C", "B", "A")),
    (("A", "b", "C"), "second", ("b", "B", "A", "C")),
    (("B", "a", "C"), "second", ("a", "A", "B", "C")),
    (("C", "a", "b"), "first", ("C", "c", "b", "a")),
    (("A", "b", "c"), "first", ("A", "a", "b", "c")),
    (("B", "a", "c"), "first", ("B", "b", "a", "c")),
)


def _apply_law(state: TriangleState, law: str, slots: Tuple[str, str, str, str]) -> TriangleState:
    solver = second_cosine_rule if law == "second" else first_cosine_rule
    values = solver(*(getattr(state, slot) for slot in slots))
    return state.with_values(**dict(zip(slots, values)))


def apply_cosine_pattern(state: TriangleState) -> Optional[TriangleState]:
    """Apply the cosine law matching the first known two-angle/one-side or one-angle/two-side pattern."""

    for known, law, slots in _COSINE_PATTERNS:
        if all(state.known(slot) for slot in known):
            return _changed(state, _apply_law(state, law, slots))
    return None


def derive_angles_from_sides(state: TriangleState) -> Optional[TriangleState]:
    if not all(side is not None for side in state.sides()):
        return None
    updated = _apply_law(state, "first", ("B", "b", "a", "c"))
    updated = _apply_law(updated, "first", ("A", "a", "b", "c"))
    updated = _apply_law(updated, "first", ("C", "c", "b", "a"))
    return _changed(state, updated)


def derive_sides_from_angles(state: TriangleState) -> Optional[TriangleState]:
    """Angle-angle-angle closure; only meaningful in the hyperbolic plane."""

    if not all(angle is not None for angle in state.angles()):
        return None
    if any(side is not None for side in state.sides()):
        return None
    updated = _apply_law(state, "second", ("a", "A", "B", "C"))
    updated = _apply_law(updated, "second", ("c", "C", "B", "A"))
    updated = _apply_law(updated, "second", ("b", "B", "A", "C"))
    return _changed(state, updated)


# (side, side, angle opposite the missing side, missing side)
_SIDE_PAIRS = (
    ("a", "b", "C", "c"),
    ("a", "c", "B", "b"),
    ("b", "c", "A", "a"),
)


def resolve_two_sides(state: TriangleState) -> Optional[TriangleState]:
    updated = state
    for first, second, angle_slot, side_slot in _SIDE_PAIRS:
        if any(updated.known(slot) for slot in ANGLE_SLOTS):
            break
        if updated.known(first) and updated.known(second) and not updated.known(side_slot):
            angle, side, _, _ = maximum_angle_and_side(
                None, None, getattr(updated, first), getattr(updated, second)
            )
            updated = updated.with_values(**{angle_slot: angle, side_slot: side})
    return _changed(state, updated)


COMPLETION_RULES: Sequence[Tuple[str, Rule]] = (
    ("sine-rule", propagate_by_sine_rule),
    ("right-angle", close_right_triangle),
    ("cosine-pattern", apply_cosine_pattern),
    ("angles-from-sides", derive_angles_from_sides),
    ("sine-rule", propagate_by_sine_rule),
    ("sides-from-angles", derive_sides_from_angles),
    ("maximum-angle", resolve_two_sides),
    ("sine-rule", propagate_by_sine_rule),
)


__all__ = [
    "COMPLETION_RULES",
    "RIGHT_ANGLE",
    "Rule",
    "apply_cosine_pattern",
    "close_right_triangle",
    "derive_angles_from_sides",
    "derive_sides_from_angles",
    "propagate_by_sine_rule",
    "resolve_two_sides",
]
