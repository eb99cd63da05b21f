"""Poincaré disk projection engine."""

from .config import DrawConfig, get_draw_config, set_draw_config
from .model import ArcDescriptor, DiskFrame, LineDescriptor, Point, Primitive
from .patterns import (
    circle_series,
    complex_pattern,
    oricycles,
    parallels,
    perpendicular_rosette,
    perpendiculars,
)
from .projection import curvature_arc, disk_fraction, geodesic_between, radial_side
from .shapes import (
    boundary_circle,
    hyperbolic_line,
    hyperbolic_triangle,
    poincare_circle,
    rectangle,
    regular_polygon,
    triangle_primitives,
)

__all__ = [
    "ArcDescriptor",
    "DiskFrame",
    "DrawConfig",
    "LineDescriptor",
    "Point",
    "Primitive",
    "boundary_circle",
    "circle_series",
    "complex_pattern",
    "curvature_arc",
    "disk_fraction",
    "geodesic_between",
    "get_draw_config",
    "hyperbolic_line",
    "hyperbolic_triangle",
    "oricycles",
    "parallels",
    "perpendicular_rosette",
    "perpendiculars",
    "poincare_circle",
    "radial_side",
    "rectangle",
    "regular_polygon",
    "set_draw_config",
    "triangle_primitives",
]
