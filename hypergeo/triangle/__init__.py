"""Hyperbolic triangle solver."""

from __future__ import annotations

import logging

from .complete import complete_triangle, solve_triangle, validate_triangle_inputs
from .laws import (
    first_cosine_rule,
    maximum_angle_and_side,
    pythagorean,
    second_cosine_rule,
    sine_rule,
)
from .rules import COMPLETION_RULES
from .types import TriangleState

if not logging.getLogger().handlers:  # pragma: no cover - depends on host application
    logging.basicConfig(level=logging.INFO)

__all__ = [
    "COMPLETION_RULES",
    "TriangleState",
    "complete_triangle",
    "first_cosine_rule",
    "maximum_angle_and_side",
    "pythagorean",
    "second_cosine_rule",
    "sine_rule",
    "solve_triangle",
    "validate_triangle_inputs",
]
