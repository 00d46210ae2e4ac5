"""Shape library — three concrete variants of the :class:`Shape` contract.

All shapes are **frozen** dataclasses: immutable value objects whose
identity is nothing more than their field values.  No dimension is
validated; zero or negative inputs simply produce zero or negative
results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from drills.core.protocols import Shape


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle described by its radius."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@dataclass(frozen=True, slots=True)
class RightTriangle:
    """Right triangle whose two legs are *base* and *height*."""

    base: float
    height: float

    def area(self) -> float:
        return 0.5 * self.base * self.height

    def perimeter(self) -> float:
        """Return ``base + height + hypotenuse``.

        The angle between *base* and *height* is always taken to be a
        right angle.
        """
        hypotenuse = math.sqrt(self.base * self.base + self.height * self.height)
        return self.base + self.height + hypotenuse


# ---------------------------------------------------------------------------
# Polymorphic measurement
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ShapeMeasurement:
    """Area and perimeter of one shape, captured as a value."""

    kind: str
    """Class name of the measured shape (e.g. ``"Circle"``)."""

    area: float

    perimeter: float


def measure(shape: Shape) -> ShapeMeasurement:
    """Query *shape* through the :class:`Shape` contract only."""
    return ShapeMeasurement(
        kind=type(shape).__name__,
        area=shape.area(),
        perimeter=shape.perimeter(),
    )
