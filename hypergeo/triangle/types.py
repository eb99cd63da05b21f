from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Dict, Optional, Tuple

Measure = Optional[float]

ANGLE_SLOTS: Tuple[str, str, str] = ("A", "B", "C")
SIDE_SLOTS: Tuple[str, str, str] = ("a", "b", "c")
SLOT_ORDER: Tuple[str, ...] = ("A", "a", "B", "b", "C", "c")


def as_measure(value: Optional[float]) -> Measure:
    """Map the legacy ``0`` sentinel (and ``None``) to an unknown slot."""

    if value is None or value == 0:
        return None
    return float(value)


@dataclass(frozen=True)
class TriangleState:
    """Six triangle measurements; angles in radians, ``None`` marks unknown slots.

    Side ``a`` is opposite angle ``A`` and so on.
    """

    A: Measure = None
    a: Measure = None
    B: Measure = None
    b: Measure = None
    C: Measure = None
    c: Measure = None

    @classmethod
    def from_values(
        cls,
        A: Optional[float] = 0.0,
        a: Optional[float] = 0.0,
        B: Optional[float] = 0.0,
        b: Optional[float] = 0.0,
        C: Optional[float] = 0.0,
        c: Optional[float] = 0.0,
    ) -> "TriangleState":
        return cls(
            A=as_measure(A),
            a=as_measure(a),
            B=as_measure(B),
            b=as_measure(b),
            C=as_measure(C),
            c=as_measure(c),
        )

    def known(self, slot: str) -> bool:
        return getattr(self, slot) is not None

    def known_mask(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) is not None for f in fields(self)}

    def known_count(self) -> int:
        return sum(self.known_mask().values())

    def is_complete(self) -> bool:
        return self.known_count() == len(SLOT_ORDER)

    def angles(self) -> Tuple[Measure, Measure, Measure]:
        return tuple(getattr(self, slot) for slot in ANGLE_SLOTS)  # type: ignore[return-value]

    def sides(self) -> Tuple[Measure, Measure, Measure]:
        return tuple(getattr(self, slot) for slot in SIDE_SLOTS)  # type: ignore[return-value]

    def angle_sum(self) -> float:
        return sum(value for value in self.angles() if value is not None)

    def with_values(self, **values: Measure) -> "TriangleState":
        return replace(self, **values)

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        """Return ``(A, a, B, b, C, c)`` with unknown slots as ``0.0``."""

        return tuple(0.0 if getattr(self, slot) is None else getattr(self, slot) for slot in SLOT_ORDER)  # type: ignore[return-value]

    def in_degrees(self) -> Dict[str, Measure]:
        out: Dict[str, Measure] = {}
        for slot in SLOT_ORDER:
            value = getattr(self, slot)
            if value is not None and slot in ANGLE_SLOTS:
                value = math.degrees(value)
            out[slot] = value
        return out


__all__ = [
    "ANGLE_SLOTS",
    "Measure",
    "SIDE_SLOTS",
    "SLOT_ORDER",
    "TriangleState",
    "as_measure",
]
