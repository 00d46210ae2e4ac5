"""Protocols (interfaces) consumed by the core layer.

Shapes are matched structurally: any object that implements
:meth:`Shape.area` and :meth:`Shape.perimeter` satisfies the contract
without inheriting from anything.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    """Capability contract shared by every 2-D shape."""

    def area(self) -> float:
        """Return the area enclosed by the shape."""
        ...  # pragma: no cover

    def perimeter(self) -> float:
        """Return the length of the shape's boundary."""
        ...  # pragma: no cover
