"""Configuration helpers for the drawing engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class DrawConfig:
    boundary_margin: float = 0.95
    near_boundary_radius: float = 0.999
    max_gyrovector_radius: float = 35.0
    flat_tolerance: float = 1e-9
    parallel_offset_degrees: float = 179.0
    stroke_color: str = "black"
    stroke_width: float = 1.0
    boundary_color: str = "blue"
    boundary_width: float = 2.0


_DRAW_CONFIG = DrawConfig()


def get_draw_config() -> DrawConfig:
    return copy.deepcopy(_DRAW_CONFIG)


def set_draw_config(config: DrawConfig) -> None:
    global _DRAW_CONFIG
    _DRAW_CONFIG = copy.deepcopy(config)
