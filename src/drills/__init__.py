"""drills — introductory programming exercises.

Factorial, string repetition, and a small shape library unified behind
one capability interface.
"""

from drills.core.geometry import Circle, Rectangle, RightTriangle, ShapeMeasurement, measure
from drills.core.numbers import factorial
from drills.core.protocols import Shape
from drills.core.shape_factory import build_shape
from drills.core.strings import repeat
from drills.version import __version__

__all__: list[str] = [
    "Circle",
    "Rectangle",
    "RightTriangle",
    "Shape",
    "ShapeMeasurement",
    "__version__",
    "build_shape",
    "factorial",
    "measure",
    "repeat",
]
