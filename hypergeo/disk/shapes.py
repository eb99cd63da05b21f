"""Primitive shape builders.

Public builders take angles in degrees, validate their parameters and return
the list of descriptors that draws the shape. Nothing here touches a
rendering surface.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from ..errors import (
    AmbiguousInput,
    ImpossibleInHyperbolicGeometry,
    InvalidAngles,
    InvalidSides,
    OutOfDomain,
    TooLarge,
)
from ..trig import degrees_to_radians, poincare_gyrovector_convert
from ..triangle import TriangleState, complete_triangle, second_cosine_rule, solve_triangle
from ..triangle.complete import validate_triangle_inputs
from .config import DrawConfig, get_draw_config
from .model import ArcDescriptor, DiskFrame, Primitive
from .projection import curvature_arc, disk_fraction, geodesic_between, radial_side

logger = logging.getLogger(__name__)

MAX_BOUNDARY_DEGREES = 360.0


def boundary_circle(frame: DiskFrame) -> ArcDescriptor:
    return ArcDescriptor.full_circle(frame.center, frame.radius)


def triangle_primitives(
    frame: DiskFrame, state: TriangleState, rotation: float, config: Optional[DrawConfig] = None
) -> List[Primitive]:
    """Draw a completed triangle with vertex ``C`` at the disk center.

    Sides ``a`` and ``b`` are the straight radial sides, ``c`` is the arc.
    """

    aung = disk_fraction(state.a)  # type: ignore[arg-type]
    bung = disk_fraction(state.b)  # type: ignore[arg-type]
    return [
        radial_side(frame, aung, rotation),
        radial_side(frame, bung, rotation + state.C),  # type: ignore[operator]
        curvature_arc(frame, state.A, state.B, state.C, rotation, aung, bung, config),  # type: ignore[arg-type]
    ]


def hyperbolic_triangle(
    frame: DiskFrame,
    A: float = 0.0,
    a: float = 0.0,
    B: float = 0.0,
    b: float = 0.0,
    C: float = 0.0,
    c: float = 0.0,
    rotation: float = 0.0,
    config: Optional[DrawConfig] = None,
) -> List[Primitive]:
    """Complete and draw a triangle from 2-3 known measurements (angles in degrees)."""

    solved = solve_triangle(
        degrees_to_radians(A), a, degrees_to_radians(B), b, degrees_to_radians(C), c
    )
    logger.info("Triangle solved: %s", solved.in_degrees())
    return triangle_primitives(frame, solved, degrees_to_radians(rotation) + math.pi / 2.0, config)


def regular_polygon(
    frame: DiskFrame,
    n: int,
    interior_angle: float,
    rotation: float = 0.0,
    config: Optional[DrawConfig] = None,
) -> List[Primitive]:
    """Regular ``n``-gon centered in the disk with the given interior angle in degrees."""

    if n < 3:
        raise InvalidSides(f"a polygon needs at least three sides, got {n}")
    if interior_angle <= 0:
        raise InvalidAngles("the interior angle must be positive")
    if n * interior_angle >= (n - 2) * 180.0:
        raise ImpossibleInHyperbolicGeometry(
            f"{n} angles of {interior_angle:g} degrees do not fit a hyperbolic polygon"
        )

    C = 2.0 * math.pi / n
    A = B = degrees_to_radians(interior_angle) / 2.0
    side, _, _, _ = second_cosine_rule(None, A, C, B)
    aung = disk_fraction(side)  # type: ignore[arg-type]
    offset = degrees_to_radians(rotation)
    logger.info("Polygon n=%d side=%.6g disk fraction=%.6g", n, side, aung)
    return [
        curvature_arc(frame, A, B, C, -(C / 2.0) + i * C + offset, aung, aung, config)
        for i in range(n)
    ]


def rectangle(
    frame: DiskFrame,
    A: float,
    B: float,
    a: float,
    b: float,
    rotation: float = 0.0,
    config: Optional[DrawConfig] = None,
) -> List[Primitive]:
    """Quadrilateral with two radial sides ``a`` and ``b`` meeting at the center.

    ``A`` (degrees) is the angle between side ``a`` and the far side; an
    auxiliary triangle yields the diagonal and the remaining angles. ``B`` is
    only checked to differ from ``A``.
    """

    if A == B:
        raise InvalidAngles("starting and ending angles must be different")

    state = TriangleState.from_values(a=a, B=degrees_to_radians(A), c=b)
    validate_triangle_inputs(state)
    helper = complete_triangle(state)
    B1, diagonal, C1 = helper.A, helper.b, helper.C

    angle = degrees_to_radians(A)
    offset = degrees_to_radians(rotation) + math.pi / 2.0
    aung = disk_fraction(a)
    diagonal_ung = disk_fraction(diagonal)  # type: ignore[arg-type]
    bung = disk_fraction(b)
    return [
        radial_side(frame, aung, offset + C1 + B1),  # type: ignore[operator]
        radial_side(frame, bung, offset),
        curvature_arc(frame, C1, angle, B1, offset, bung, diagonal_ung, config),  # type: ignore[arg-type]
        curvature_arc(frame, angle, B1, C1, offset + B1, diagonal_ung, aung, config),  # type: ignore[arg-type,operator]
    ]


def hyperbolic_line(
    frame: DiskFrame, a1: float, a2: float, config: Optional[DrawConfig] = None
) -> Primitive:
    """Geodesic between the boundary directions ``a1`` and ``a2`` given in degrees."""

    if a1 > MAX_BOUNDARY_DEGREES or a2 > MAX_BOUNDARY_DEGREES:
        raise InvalidAngles("angles must be at most 360 degrees")
    if a1 == a2:
        raise InvalidAngles("enter two different angles")
    return geodesic_between(frame, degrees_to_radians(a1), degrees_to_radians(a2), config)


def poincare_circle(
    frame: DiskFrame, r: float = 0.0, rg: float = 0.0, config: Optional[DrawConfig] = None
) -> ArcDescriptor:
    """Circle around the disk center from a Poincaré radius ``r`` or a gyrovector radius ``rg``."""

    config = config or get_draw_config()
    if (r != 0 and rg != 0) or (r == 0 and rg == 0):
        raise AmbiguousInput("enter exactly one of the Poincaré and gyrovector radii")
    if r >= 1 or r < 0:
        raise OutOfDomain("the Poincaré radius must lie in [0, 1)")
    if rg < 0:
        raise OutOfDomain("the gyrovector radius must not be negative")

    r, rg = poincare_gyrovector_convert(r, rg)
    if rg > config.max_gyrovector_radius:
        raise TooLarge(f"gyrovector radius {rg:g} is too large to render")
    return ArcDescriptor.full_circle(frame.center, r * frame.radius)


__all__ = [
    "MAX_BOUNDARY_DEGREES",
    "boundary_circle",
    "hyperbolic_line",
    "hyperbolic_triangle",
    "poincare_circle",
    "rectangle",
    "regular_polygon",
    "triangle_primitives",
]
