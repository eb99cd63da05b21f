"""Scalar helpers for hyperbolic trigonometry and model conversions.

All functions are pure. Radius conversions keep the historical contract where
``0`` stands for "not given": exactly one of the paired arguments is expected
to be nonzero and the other one is filled in.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Tuple

from .errors import OutOfDomain

logger = logging.getLogger(__name__)


def asinh(x: float) -> float:
    return math.log(x + math.sqrt(x * x + 1.0))


def acosh(x: float) -> float:
    """Inverse hyperbolic cosine; returns NaN outside ``x >= 1``."""

    if x < 1.0:
        return math.nan
    return math.log(x + math.sqrt(x * x - 1.0))


def degrees_to_radians(x: float) -> float:
    return x * math.pi / 180.0


def radians_to_degrees(x: float) -> float:
    return 180.0 * x / math.pi


def poincare_gyrovector_convert(r: float, rg: float) -> Tuple[float, float]:
    """Convert between a Poincaré disk radius ``r`` and a gyrovector radius ``rg``.

    Only one of the two may be nonzero; the missing one is computed from
    ``rg = ln((1 + r) / (1 - r))`` or ``r = tanh(rg / 2)``. When both or
    neither are nonzero the pair is returned unchanged.
    """

    if r != 0 and rg == 0:
        rg = math.log((1.0 + r) / (1.0 - r))
    elif rg != 0 and r == 0:
        r = math.tanh(rg / 2.0)
    return r, rg


class HalfPlaneParameters(NamedTuple):
    """Circle parameters in the disk (``x, y, r, l``) and half-plane (``xg, yg, rg, lg``) views."""

    x: float
    y: float
    r: float
    l: float
    xg: float
    yg: float
    rg: float
    lg: float


def _radius_factor(rg: float) -> float:
    return math.sqrt(math.cosh(rg) * math.cosh(rg) - 1.0)


def _height_above_axis(y: float, r: float) -> float:
    if abs(y) <= abs(r):
        raise OutOfDomain(f"center height {y:g} must exceed the circle radius {r:g}")
    return math.sqrt(y * y - r * r)


def _height_from_radius(r: float, rg: float) -> float:
    factor = _radius_factor(rg)
    if factor == 0:
        raise OutOfDomain(f"hyperbolic radius {rg:g} is too small to place the circle")
    return r / factor


def disk_half_plane_convert(
    x: float = 0.0,
    y: float = 0.0,
    r: float = 0.0,
    l: float = 0.0,
    xg: float = 0.0,
    yg: float = 0.0,
    rg: float = 0.0,
    lg: float = 0.0,
) -> HalfPlaneParameters:
    """Fill the derivable circle parameters from one pair of known inputs.

    The abscissa is shared between both views. The remaining slots are
    resolved by the first satisfied pairing in this order: ``y & r``,
    ``y & l``, ``yg & rg``, ``yg & lg``, ``y & yg``, ``l & lg``, ``rg & r``.
    Later pairings are ignored even when their inputs are present.

    Raises :class:`~hypergeo.errors.OutOfDomain` when the circle would not
    fit above the boundary line, i.e. the center height does not exceed the
    radius or the hyperbolic radius is numerically zero.
    """

    if x != 0:
        xg = x
    if xg != 0:
        x = xg

    two_pi = 2.0 * math.pi
    if y != 0 and r != 0:
        yg = _height_above_axis(y, r)
        rg = acosh(y / yg)
        l = two_pi * r
        lg = two_pi * math.sinh(rg)
    elif y != 0 and l != 0:
        r = l / two_pi
        yg = _height_above_axis(y, r)
        rg = acosh(y / yg)
        lg = two_pi * math.sinh(rg)
    elif yg != 0 and rg != 0:
        r = yg * _radius_factor(rg)
        y = yg * math.cosh(rg)
        l = two_pi * r
        lg = two_pi * math.sinh(rg)
    elif yg != 0 and lg != 0:
        rg = asinh(lg / two_pi)
        r = yg * _radius_factor(rg)
        y = yg * math.cosh(rg)
        l = two_pi * r
    elif y != 0 and yg != 0:
        rg = acosh(y / yg)
        r = yg * _radius_factor(rg)
        l = two_pi * r
        lg = two_pi * math.sinh(rg)
    elif l != 0 and lg != 0:
        r = l / two_pi
        rg = asinh(lg / two_pi)
        yg = _height_from_radius(r, rg)
        y = yg * math.cosh(rg)
    elif rg != 0 and r != 0:
        yg = _height_from_radius(r, rg)
        y = yg * math.cosh(rg)
        l = two_pi * r
        lg = two_pi * math.sinh(rg)
    else:
        logger.debug("No parameter pairing satisfied; returning inputs unchanged")

    return HalfPlaneParameters(x, y, r, l, xg, yg, rg, lg)


def triangle_area(A: float, B: float, C: float, k: float = 1.0) -> float:
    """Area of a hyperbolic triangle from its angle defect, ``k**2 * (pi - A - B - C)``."""

    return k * k * (math.pi - A - B - C)


def angle_of_parallelism(distance: float, k: float = 1.0) -> float:
    return 2.0 * math.atan(math.exp(-distance / k))


__all__ = [
    "HalfPlaneParameters",
    "acosh",
    "angle_of_parallelism",
    "asinh",
    "degrees_to_radians",
    "disk_half_plane_convert",
    "poincare_gyrovector_convert",
    "radians_to_degrees",
    "triangle_area",
]
