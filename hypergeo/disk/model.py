"""Value types exchanged between the projection engine and rendering surfaces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .config import get_draw_config

Point = Tuple[float, float]


@dataclass(frozen=True)
class DiskFrame:
    """Screen placement of the Poincaré disk: center ``(x, y)`` and outer radius."""

    x: float
    y: float
    radius: float

    @classmethod
    def from_canvas(cls, width: float, margin: Optional[float] = None) -> "DiskFrame":
        """Frame centered on a square canvas of side ``width``."""

        if margin is None:
            margin = get_draw_config().boundary_margin
        half = width / 2.0
        return cls(x=half, y=half, radius=half * margin)

    @property
    def center(self) -> Point:
        return self.x, self.y

    def boundary_point(self, angle: float) -> Point:
        """Point on the boundary at ``angle`` (radians, counterclockwise, y grows downward)."""

        return self.x + self.radius * math.cos(angle), self.y - self.radius * math.sin(angle)


@dataclass(frozen=True)
class ArcDescriptor:
    """Circular arc from ``start_angle`` to ``end_angle`` in the direction of increasing angle."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float

    kind = "arc"

    @classmethod
    def full_circle(cls, center: Point, radius: float) -> "ArcDescriptor":
        return cls(center=center, radius=radius, start_angle=0.0, end_angle=2.0 * math.pi)

    def point_at(self, angle: float) -> Point:
        return (
            self.center[0] + self.radius * math.cos(angle),
            self.center[1] + self.radius * math.sin(angle),
        )

    @property
    def start(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end(self) -> Point:
        return self.point_at(self.end_angle)


@dataclass(frozen=True)
class LineDescriptor:
    """Straight segment, used for radial sides and zero-curvature geodesics."""

    start: Point
    end: Point

    kind = "line"

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


Primitive = Union[ArcDescriptor, LineDescriptor]


__all__ = [
    "ArcDescriptor",
    "DiskFrame",
    "LineDescriptor",
    "Point",
    "Primitive",
]
