"""Projection of solved hyperbolic measurements into disk-model arcs."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..logging_utils import apply_debug_logging
from ..trig import poincare_gyrovector_convert
from ..triangle.laws import first_cosine_rule, sine_rule
from .config import DrawConfig, get_draw_config
from .model import ArcDescriptor, DiskFrame, LineDescriptor, Primitive

logger = logging.getLogger(__name__)


def disk_fraction(side: float) -> float:
    """Euclidean distance from the disk center, as a fraction of R, for a hyperbolic length."""

    return poincare_gyrovector_convert(0.0, side)[0]


def radial_point(frame: DiskFrame, fraction: float, rotation: float):
    return (
        frame.x + fraction * frame.radius * math.sin(rotation),
        frame.y + fraction * frame.radius * math.cos(rotation),
    )


def radial_side(frame: DiskFrame, fraction: float, rotation: float) -> LineDescriptor:
    return LineDescriptor(start=frame.center, end=radial_point(frame, fraction, rotation))


def curvature_arc(
    frame: DiskFrame,
    A: float,
    B: float,
    C: float,
    rotation: float,
    aung: float,
    bung: float,
    config: Optional[DrawConfig] = None,
) -> Primitive:
    """Third side of a triangle whose vertex ``C`` sits at the disk center.

    The two other vertices lie at Euclidean fractions ``aung`` (direction
    ``rotation``) and ``bung`` (direction ``rotation + C``) of the disk
    radius. The geodesic through them is a circle crossing the boundary at
    right angles; its central angle equals the defect ``pi - (A + B + C)``.
    A vanishing defect yields the diameter at ``rotation`` instead.
    """

    config = config or get_draw_config()
    R = frame.radius
    defect = math.pi - (A + B + C)

    if abs(defect) <= config.flat_tolerance:
        start = (
            frame.x + R * math.cos(rotation + math.pi / 2.0),
            frame.y - R * math.sin(rotation + math.pi / 2.0),
        )
        end = (
            frame.x + R * math.cos(rotation + 1.5 * math.pi),
            frame.y - R * math.sin(rotation + 1.5 * math.pi),
        )
        return LineDescriptor(start=start, end=end)

    chord_sq = (math.sin(C) * bung * R) ** 2 + (bung * R * math.cos(C) - aung * R) ** 2
    radius = math.sqrt(chord_sq / (2.0 * (1.0 - math.cos(defect))))

    offset = aung * R + radius * math.sin(B)
    center_x = frame.x + radius * math.cos(B) * math.cos(rotation) + offset * math.sin(rotation)
    center_y = frame.y + offset * math.cos(rotation) - radius * math.cos(B) * math.sin(rotation)

    start_x, start_y = radial_point(frame, aung, rotation)
    end_x, end_y = radial_point(frame, bung, rotation + C)

    return ArcDescriptor(
        center=(center_x, center_y),
        radius=radius,
        start_angle=math.atan2(start_y - center_y, start_x - center_x),
        end_angle=math.atan2(end_y - center_y, end_x - center_x),
    )


def geodesic_between(
    frame: DiskFrame, a1: float, a2: float, config: Optional[DrawConfig] = None
) -> Primitive:
    """Geodesic joining the boundary directions ``a1`` and ``a2`` (radians)."""

    config = config or get_draw_config()
    if a2 - a1 > math.pi:
        a1 = 2.0 * math.pi + a1
    if a1 - a2 > math.pi:
        a2 = 2.0 * math.pi + a2

    C = abs(a2 - a1)
    if math.isclose(C, math.pi, abs_tol=1e-12):
        return LineDescriptor(start=frame.boundary_point(a1), end=frame.boundary_point(a2))

    aung = config.near_boundary_radius
    leg = poincare_gyrovector_convert(aung, 0.0)[1]
    _, chord, _, _ = first_cosine_rule(C, None, leg, leg)
    A, _, B, _, _, _ = sine_rule(None, leg, None, leg, C, chord)
    return curvature_arc(
        frame, A, B, C, (a1 + a2) / 2.0 + math.pi / 2.0 - C / 2.0, aung, aung, config
    )


__all__ = [
    "curvature_arc",
    "disk_fraction",
    "geodesic_between",
    "radial_point",
    "radial_side",
]

apply_debug_logging(globals(), logger=logger)
