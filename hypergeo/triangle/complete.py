"""Triangle completion driver."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..errors import InsufficientData, InvalidTriangle, TooManyInputs
from .rules import COMPLETION_RULES
from .types import TriangleState

logger = logging.getLogger(__name__)

MIN_KNOWN = 2
MAX_KNOWN = 3

# (angle, side) pairs whose slots stay unknown while the other two pairs are complete
_OPEN_PAIRS = (("C", "c"), ("B", "b"), ("A", "a"))


def _violates_triangle_inequality(a: float, b: float, c: float) -> bool:
    return c >= a + b or a >= b + c or b >= a + c


def validate_triangle_inputs(state: TriangleState) -> None:
    """Reject partial measurement sets that cannot start a completion."""

    count = state.known_count()
    if count > MAX_KNOWN:
        raise TooManyInputs(f"expected at most {MAX_KNOWN} known measurements, got {count}")
    if count < MIN_KNOWN:
        raise InsufficientData(f"expected at least {MIN_KNOWN} known measurements, got {count}")

    known_angles = [angle for angle in state.angles() if angle is not None]
    known_sides = [side for side in state.sides() if side is not None]
    if any(angle < 0 for angle in known_angles):
        raise InvalidTriangle("angles must not be negative")
    if any(side < 0 for side in known_sides):
        raise InvalidTriangle("sides must not be negative")
    if any(math.isclose(angle, math.pi) for angle in known_angles):
        raise InvalidTriangle("an angle of 180 degrees is degenerate")
    if sum(known_angles) >= math.pi:
        raise InvalidTriangle("angle sum must stay below 180 degrees")
    if len(known_sides) == 3 and _violates_triangle_inequality(*known_sides):
        raise InvalidTriangle("sides violate the triangle inequality")


def _check_closed(state: TriangleState) -> None:
    for angle_slot, side_slot in _OPEN_PAIRS:
        others_known = all(
            state.known(slot)
            for pair in _OPEN_PAIRS
            if pair != (angle_slot, side_slot)
            for slot in pair
        )
        if others_known and not state.known(angle_slot) and not state.known(side_slot):
            raise InsufficientData(
                f"two angle/side pairs are known but {angle_slot}/{side_slot} cannot be derived"
            )
    if not state.is_complete():
        missing = [slot for slot, known in state.known_mask().items() if not known]
        raise InsufficientData(f"could not derive {', '.join(missing)}")


def complete_triangle(state: TriangleState) -> TriangleState:
    """Run the completion rules once each and return the fully specified triangle."""

    current = state
    for name, rule in COMPLETION_RULES:
        updated: Optional[TriangleState] = rule(current)
        if updated is None:
            continue
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rule %s fired: %s", name, updated.in_degrees())
        current = updated

    _check_closed(current)
    if current.angle_sum() >= math.pi:
        raise InvalidTriangle(
            f"completed angle sum {math.degrees(current.angle_sum()):.6g} degrees is not below 180"
        )
    if any(angle <= 0 for angle in current.angles()):  # type: ignore[operator]
        raise InvalidTriangle("completed triangle has a non-positive angle")
    if _violates_triangle_inequality(*current.sides()):  # type: ignore[arg-type]
        raise InvalidTriangle("completed sides violate the triangle inequality")
    return current


def solve_triangle(
    A: float = 0.0,
    a: float = 0.0,
    B: float = 0.0,
    b: float = 0.0,
    C: float = 0.0,
    c: float = 0.0,
) -> TriangleState:
    """Validate and complete a triangle given in radians; ``0`` marks an unknown slot."""

    state = TriangleState.from_values(A, a, B, b, C, c)
    logger.info("Completing triangle from %d known measurement(s)", state.known_count())
    validate_triangle_inputs(state)
    return complete_triangle(state)


__all__ = [
    "MAX_KNOWN",
    "MIN_KNOWN",
    "complete_triangle",
    "solve_triangle",
    "validate_triangle_inputs",
]
