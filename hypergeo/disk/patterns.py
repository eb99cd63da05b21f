"""Composite generators built from repeated geodesic and circle constructions.

A failing sub-construction aborts the whole composite; nothing is caught here.
"""

from __future__ import annotations

import math
from typing import List, Optional

import numpy as np

from ..errors import InvalidAngles, InvalidParameter, InvalidRange, OutOfDomain
from ..trig import degrees_to_radians, poincare_gyrovector_convert
from .config import DrawConfig, get_draw_config
from .model import ArcDescriptor, DiskFrame, Primitive
from .projection import geodesic_between
from .shapes import MAX_BOUNDARY_DEGREES


def _check_direction(angle: float) -> None:
    if angle > MAX_BOUNDARY_DEGREES:
        raise InvalidAngles("angle must be at most 360 degrees")


def _check_count(n: int) -> None:
    if n < 1:
        raise InvalidParameter(f"enter a positive number of elements, got {n}")


def oricycles(frame: DiskFrame, n: int, direction: float) -> List[ArcDescriptor]:
    """``n`` circles internally tangent to the boundary at ``direction`` (degrees).

    Radii grow linearly from ``R / (n + 1)`` to ``n * R / (n + 1)``.
    """

    _check_count(n)
    a = degrees_to_radians(direction)
    radii = np.arange(1, n + 1) * frame.radius / (n + 1)
    circles = []
    for r in radii:
        distance = frame.radius - float(r)
        center = (frame.x + distance * math.cos(a), frame.y - distance * math.sin(a))
        circles.append(ArcDescriptor.full_circle(center, float(r)))
    return circles


def circle_series(frame: DiskFrame, n: int, r1: float, r2: float) -> List[ArcDescriptor]:
    """Concentric circles with gyrovector radii spread evenly over ``[r1, r2]``."""

    if n < 0:
        raise InvalidParameter(f"number of circles must not be negative, got {n}")
    if n == 0:
        return []
    if r2 <= r1:
        raise InvalidRange("outer radius should be greater than inner radius")
    if r1 < 0:
        raise OutOfDomain("gyrovector radii must not be negative")

    if n == 1:
        radii = np.array([(r1 + r2) / 2.0])
    else:
        radii = np.linspace(r1, r2, n)
    circles = []
    for rg in radii:
        r, _ = poincare_gyrovector_convert(0.0, float(rg))
        circles.append(ArcDescriptor.full_circle(frame.center, r * frame.radius))
    return circles


def perpendiculars(
    frame: DiskFrame, n: int, a: float, config: Optional[DrawConfig] = None
) -> List[Primitive]:
    """``n`` geodesics symmetric about the direction ``a`` (degrees), all perpendicular to it."""

    _check_direction(a)
    _check_count(n)
    center = degrees_to_radians(a)
    step = math.pi / (n + 1)
    return [
        geodesic_between(frame, center - step * i, center + step * i, config)
        for i in range(1, n + 1)
    ]


def parallels(
    frame: DiskFrame, k: int, a1: float, config: Optional[DrawConfig] = None
) -> List[Primitive]:
    """``k`` geodesics through the ideal point ``a1`` (degrees).

    Lines fan out on both sides in steps of ``2 * pi / (k + 1)``; an odd count
    adds one line that nearly reaches the antipode.
    """

    config = config or get_draw_config()
    _check_direction(a1)
    _check_count(k)
    origin = degrees_to_radians(a1)
    step = 2.0 * math.pi / (k + 1)
    half = k // 2

    lines = [geodesic_between(frame, origin, origin + i * step, config) for i in range(1, half + 1)]
    if k % 2 == 1:
        lines.append(
            geodesic_between(
                frame, origin, origin + degrees_to_radians(config.parallel_offset_degrees), config
            )
        )
    lines.extend(geodesic_between(frame, origin, origin - i * step, config) for i in range(1, half + 1))
    return lines


def perpendicular_rosette(
    frame: DiskFrame,
    n: int = 21,
    step_degrees: float = 30.0,
    config: Optional[DrawConfig] = None,
) -> List[Primitive]:
    """Perpendicular pencils repeated every ``step_degrees`` around the disk."""

    if step_degrees <= 0:
        raise InvalidAngles("the rosette step must be positive")
    count = int(round(360.0 / step_degrees))
    primitives: List[Primitive] = []
    for i in range(count):
        primitives.extend(perpendiculars(frame, n, step_degrees * i, config))
    return primitives


def complex_pattern(frame: DiskFrame, config: Optional[DrawConfig] = None) -> List[Primitive]:
    """Fixed decorative arrangement of twelve geodesics."""

    pi = math.pi
    a = 2.0 * pi / 8.0
    near = -1.5 * a - 0.66 * a
    far = -1.5 * a + 0.33 * a
    shift = 0.66 * a

    pairs = [
        (-1.5 * a, 1.5 * a),
        (-2.5 * a, 2.5 * a),
        (-2.5 * a + pi / 2.0, 2.5 * a + pi / 2.0),
        (-2.5 * a - pi / 2.0, 2.5 * a - pi / 2.0),
    ]
    for base in (pi / 2.0, pi):
        pairs.extend(
            [
                (near + base, far + base),
                (near + base - shift, far + base - shift),
                (near + base + pi, far + base + pi),
                (near + base - shift + pi, far + base - shift + pi),
            ]
        )
    return [geodesic_between(frame, a1, a2, config) for a1, a2 in pairs]


__all__ = [
    "circle_series",
    "complex_pattern",
    "oricycles",
    "parallels",
    "perpendicular_rosette",
    "perpendiculars",
]
