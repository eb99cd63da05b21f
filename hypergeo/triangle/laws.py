"""Hyperbolic triangle laws.

Every solver takes a fixed tuple of measurements, ``None`` for unknown, and
returns a new tuple of the same shape with the derivable blanks filled.
Domain violations raise :class:`~hypergeo.errors.InvalidTriangle`.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from ..errors import InvalidTriangle
from ..logging_utils import apply_debug_logging
from ..trig import acosh, asinh
from .types import Measure

logger = logging.getLogger(__name__)


def _strictly_unit(value: float) -> bool:
    return -1.0 < value < 1.0


def _acosh_checked(value: float, what: str) -> float:
    if not value >= 1.0:
        raise InvalidTriangle(f"{what}: cosh argument {value:.6g} is below 1")
    return acosh(value)


def _acos_checked(value: float, what: str) -> float:
    if not -1.0 <= value <= 1.0:
        raise InvalidTriangle(f"{what}: cosine {value:.6g} is outside [-1, 1]")
    return math.acos(value)


def pythagorean(x: Measure, y: Measure, hypotenuse: Measure) -> Tuple[Measure, Measure, Measure]:
    """Right-triangle law ``cosh(hypotenuse) = cosh(x) * cosh(y)``."""

    if x is not None and y is not None:
        return x, y, _acosh_checked(math.cosh(x) * math.cosh(y), "pythagorean")
    if x is not None and hypotenuse is not None:
        return x, _acosh_checked(math.cosh(hypotenuse) / math.cosh(x), "pythagorean"), hypotenuse
    if y is not None and hypotenuse is not None:
        return _acosh_checked(math.cosh(hypotenuse) / math.cosh(y), "pythagorean"), y, hypotenuse
    return x, y, hypotenuse


def sine_rule(
    A: Measure, a: Measure, B: Measure, b: Measure, C: Measure, c: Measure
) -> Tuple[Measure, Measure, Measure, Measure, Measure, Measure]:
    """Apply ``sinh(a)/sin(A) = sinh(b)/sin(B) = sinh(c)/sin(C)``.

    The ratio is taken from the first complete angle/side pair. Each other
    pair with exactly one known member gets the other member filled.
    """

    basis: Optional[Tuple[float, float]] = None
    for angle, side in ((A, a), (B, b), (C, c)):
        if angle is not None and side is not None:
            basis = (math.sin(angle), math.sinh(side))
            break
    if basis is None or basis[0] == 0 or basis[1] == 0:
        return A, a, B, b, C, c
    sin_basis, sinh_basis = basis

    def fill(angle: Measure, side: Measure) -> Tuple[Measure, Measure]:
        if angle is not None and side is None:
            return angle, asinh(math.sin(angle) * sinh_basis / sin_basis)
        if side is not None and angle is None:
            ratio = math.sinh(side) * sin_basis / sinh_basis
            if not _strictly_unit(ratio):
                raise InvalidTriangle(f"sine rule: ratio {ratio:.6g} is outside (-1, 1)")
            return math.asin(ratio), side
        return angle, side

    B, b = fill(B, b)
    C, c = fill(C, c)
    A, a = fill(A, a)
    return A, a, B, b, C, c


def first_cosine_rule(
    A: Measure, a: Measure, b: Measure, c: Measure
) -> Tuple[Measure, Measure, Measure, Measure]:
    """``cosh(a) = cosh(b)cosh(c) - sinh(b)sinh(c)cos(A)``, solved for ``A`` or ``a``."""

    if b is None or c is None:
        return A, a, b, c
    if a is not None and A is None:
        cos_a = (math.cosh(b) * math.cosh(c) - math.cosh(a)) / (math.sinh(b) * math.sinh(c))
        A = _acos_checked(cos_a, "first cosine rule")
    elif a is None and A is not None:
        a = _acosh_checked(
            math.cosh(b) * math.cosh(c) - math.sinh(b) * math.sinh(c) * math.cos(A),
            "first cosine rule",
        )
    return A, a, b, c


def second_cosine_rule(
    a: Measure, A: Measure, B: Measure, C: Measure
) -> Tuple[Measure, Measure, Measure, Measure]:
    """``cos(A) = -cos(B)cos(C) + sin(B)sin(C)cosh(a)``, solved for ``A`` or ``a``."""

    if B is None or C is None:
        return a, A, B, C
    if a is not None and A is None:
        cos_a = -math.cos(B) * math.cos(C) + math.sin(B) * math.sin(C) * math.cosh(a)
        if not _strictly_unit(cos_a):
            raise InvalidTriangle(f"second cosine rule: cos(A)={cos_a:.6g} is outside (-1, 1)")
        A = math.acos(cos_a)
    elif a is None and A is not None:
        denominator = math.sin(B) * math.sin(C)
        if denominator == 0:
            raise InvalidTriangle("second cosine rule: sin(B) * sin(C) is zero")
        a = _acosh_checked(
            (math.cos(B) * math.cos(C) + math.cos(A)) / denominator,
            "second cosine rule",
        )
    return a, A, B, C


def maximum_angle_and_side(
    A: Measure, a: Measure, b: float, c: float
) -> Tuple[float, float, float, float]:
    """Close a two-sides-only triangle with its maximal angle ``A`` and side ``a``."""

    tanh_product = math.tanh(b / 2.0) * math.tanh(c / 2.0)
    if not _strictly_unit(tanh_product):
        raise InvalidTriangle(f"maximum angle: tanh product {tanh_product:.6g} is outside (-1, 1)")
    A = math.acos(tanh_product)
    a = 2.0 * asinh(math.sqrt(math.sinh(b / 2.0) ** 2 + math.sinh(c / 2.0) ** 2))
    return A, a, b, c


__all__ = [
    "first_cosine_rule",
    "maximum_angle_and_side",
    "pythagorean",
    "second_cosine_rule",
    "sine_rule",
]

apply_debug_logging(globals(), logger=logger)
