"""Rendering surface protocol and the drawing façade that feeds it."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Protocol, Tuple

from .disk import (
    ArcDescriptor,
    DiskFrame,
    DrawConfig,
    LineDescriptor,
    Point,
    Primitive,
    boundary_circle,
    circle_series,
    complex_pattern,
    get_draw_config,
    hyperbolic_line,
    hyperbolic_triangle,
    oricycles,
    parallels,
    perpendicular_rosette,
    perpendiculars,
    poincare_circle,
    rectangle,
    regular_polygon,
)
from .errors import UninitializedSurface

logger = logging.getLogger(__name__)


class RenderSurface(Protocol):
    """2-D drawing surface in screen coordinates (y grows downward)."""

    def clear(self) -> None: ...

    def stroke_arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None: ...

    def stroke_line(self, p1: Point, p2: Point) -> None: ...

    def set_stroke_style(self, color: str, width: float) -> None: ...


class RecordingSurface:
    """Surface that keeps every primitive call as a tuple in :attr:`calls`."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def stroke_arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        self.calls.append(("arc", center, radius, start_angle, end_angle))

    def stroke_line(self, p1: Point, p2: Point) -> None:
        self.calls.append(("line", p1, p2))

    def set_stroke_style(self, color: str, width: float) -> None:
        self.calls.append(("style", color, width))

    def draws(self, kind: Optional[str] = None) -> List[Tuple[Any, ...]]:
        """Arc and line calls, optionally restricted to one ``kind``."""

        kinds = {kind} if kind else {"arc", "line"}
        return [call for call in self.calls if call[0] in kinds]


def render(primitives: Iterable[Primitive], surface: RenderSurface) -> int:
    """Issue one primitive call per descriptor; return the number of calls."""

    count = 0
    for primitive in primitives:
        if isinstance(primitive, ArcDescriptor):
            surface.stroke_arc(primitive.center, primitive.radius, primitive.start_angle, primitive.end_angle)
        elif isinstance(primitive, LineDescriptor):
            surface.stroke_line(primitive.start, primitive.end)
        else:
            raise TypeError(f"cannot render {type(primitive).__name__}")
        count += 1
    return count


class HyperbolicDrawer:
    """Draw hyperbolic figures on a surface; angles are given in degrees.

    Each method computes its descriptors first and only then draws, so
    invalid parameters leave the surface untouched. Composite methods draw
    their members one after the other.
    """

    def __init__(
        self,
        surface: Optional[RenderSurface],
        frame: DiskFrame,
        config: Optional[DrawConfig] = None,
    ) -> None:
        self.surface = surface
        self.frame = frame
        self.config = config or get_draw_config()

    @classmethod
    def for_canvas(cls, surface: Optional[RenderSurface], width: float) -> "HyperbolicDrawer":
        config = get_draw_config()
        return cls(surface, DiskFrame.from_canvas(width, config.boundary_margin), config)

    def _require_surface(self) -> RenderSurface:
        if self.surface is None:
            raise UninitializedSurface("rendering surface is not initialized")
        return self.surface

    def _draw(self, primitives: Iterable[Primitive]) -> List[Primitive]:
        surface = self._require_surface()
        drawn = list(primitives)
        render(drawn, surface)
        return drawn

    def clear_canvas(self) -> None:
        self._require_surface().clear()

    def set_empty_poincare_disk(self) -> List[Primitive]:
        surface = self._require_surface()
        surface.clear()
        surface.set_stroke_style(self.config.boundary_color, self.config.boundary_width)
        drawn = self._draw([boundary_circle(self.frame)])
        surface.set_stroke_style(self.config.stroke_color, self.config.stroke_width)
        return drawn

    def handle_triangle_drawing(
        self, A: float, a: float, B: float, b: float, C: float, c: float, rotation: float = 0.0
    ) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing triangle A=%s a=%s B=%s b=%s C=%s c=%s", A, a, B, b, C, c)
        return self._draw(hyperbolic_triangle(self.frame, A, a, B, b, C, c, rotation, self.config))

    def create_polygon(self, n: int, interior_angle: float, rotation: float = 0.0) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing regular polygon n=%d angle=%s", n, interior_angle)
        return self._draw(regular_polygon(self.frame, n, interior_angle, rotation, self.config))

    def create_rectangle(
        self, A: float, B: float, a: float, b: float, rotation: float = 0.0
    ) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing rectangle A=%s B=%s a=%s b=%s", A, B, a, b)
        return self._draw(rectangle(self.frame, A, B, a, b, rotation, self.config))

    def create_hyperbolic_line(self, a1: float, a2: float) -> List[Primitive]:
        self._require_surface()
        return self._draw([hyperbolic_line(self.frame, a1, a2, self.config)])

    def create_oricycle(self, n: int, direction: float) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing %d oricycle(s) toward %s degrees", n, direction)
        return self._draw(oricycles(self.frame, n, direction))

    def create_perpendiculars(self, n: int, a: float) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing %d perpendicular(s) around %s degrees", n, a)
        return self._draw(perpendiculars(self.frame, n, a, self.config))

    def create_parallels(self, k: int, a1: float) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing %d parallel(s) through %s degrees", k, a1)
        return self._draw(parallels(self.frame, k, a1, self.config))

    def create_perpendicular_rosette(self, n: int = 21, step_degrees: float = 30.0) -> List[Primitive]:
        self._require_surface()
        return self._draw(perpendicular_rosette(self.frame, n, step_degrees, self.config))

    def handle_circle_drawing(self, r: float, rg: float) -> List[Primitive]:
        self._require_surface()
        return self._draw([poincare_circle(self.frame, r, rg, self.config)])

    def handle_circle_series_drawing(self, n: int, r1: float, r2: float) -> List[Primitive]:
        self._require_surface()
        logger.info("Drawing %d circle(s) over gyrovector radii [%s, %s]", n, r1, r2)
        return self._draw(circle_series(self.frame, n, r1, r2))

    def draw_complex_pattern(self) -> List[Primitive]:
        self._require_surface()
        return self._draw(complex_pattern(self.frame, self.config))


__all__ = [
    "HyperbolicDrawer",
    "RecordingSurface",
    "RenderSurface",
    "render",
]
