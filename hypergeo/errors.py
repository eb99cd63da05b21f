"""Error hierarchy shared by the solver and the drawing engine."""

from __future__ import annotations


class HyperbolicError(ValueError):
    """Base class for every deterministic input or geometry failure."""


class InvalidTriangle(HyperbolicError):
    """Raised for degenerate measurements or a law solver domain violation."""


class InsufficientData(HyperbolicError):
    """Raised when too few measurements are known to close a triangle."""


class TooManyInputs(HyperbolicError):
    """Raised when more than three triangle measurements are given."""


class AmbiguousInput(HyperbolicError):
    """Raised when two mutually exclusive parameters are both (or neither) given."""


class ImpossibleInHyperbolicGeometry(HyperbolicError):
    """Raised when a polygon's angle sum cannot exist in the hyperbolic plane."""


class OutOfDomain(HyperbolicError):
    """Raised for radii outside the disk or values too large to render."""


class TooLarge(OutOfDomain):
    pass


class InvalidParameter(HyperbolicError):
    """Raised for counts, angles or ranges that a builder cannot use."""


class InvalidSides(InvalidParameter):
    pass


class InvalidAngles(InvalidParameter):
    pass


class InvalidRange(InvalidParameter):
    pass


class UninitializedSurface(HyperbolicError, RuntimeError):
    """Raised when a drawing call is issued without a rendering surface."""


__all__ = [
    "AmbiguousInput",
    "HyperbolicError",
    "ImpossibleInHyperbolicGeometry",
    "InsufficientData",
    "InvalidAngles",
    "InvalidParameter",
    "InvalidRange",
    "InvalidSides",
    "InvalidTriangle",
    "OutOfDomain",
    "TooLarge",
    "TooManyInputs",
    "UninitializedSurface",
]
