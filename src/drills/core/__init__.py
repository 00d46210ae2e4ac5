"""Core layer — pure exercises and the shape library.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from drills.core.geometry import Circle, Rectangle, RightTriangle, ShapeMeasurement, measure
from drills.core.numbers import factorial
from drills.core.protocols import Shape
from drills.core.shape_factory import SHAPE_KINDS, build_shape
from drills.core.strings import repeat

__all__: list[str] = [
    "SHAPE_KINDS",
    "Circle",
    "Rectangle",
    "RightTriangle",
    "Shape",
    "ShapeMeasurement",
    "build_shape",
    "factorial",
    "measure",
    "repeat",
]
