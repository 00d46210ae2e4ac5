"""Tests for the shape library (core/geometry.py, core/protocols.py)."""

from __future__ import annotations

import math

import pytest

from drills.core.geometry import Circle, Rectangle, RightTriangle, ShapeMeasurement, measure
from drills.core.protocols import Shape


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------

class TestRectangle:
    def test_area(self) -> None:
        assert Rectangle(width=10, height=5).area() == 50.0

    def test_perimeter(self) -> None:
        assert Rectangle(width=10, height=5).perimeter() == 30.0

    def test_zero_width_has_zero_area(self) -> None:
        assert Rectangle(width=0, height=5).area() == 0.0

    def test_negative_dimension_is_not_rejected(self) -> None:
        assert Rectangle(width=-2, height=3).area() == -6.0


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

class TestCircle:
    def test_area(self) -> None:
        assert Circle(radius=10).area() == pytest.approx(314.159265)

    def test_perimeter(self) -> None:
        assert Circle(radius=10).perimeter() == pytest.approx(62.831853)

    def test_area_uses_pi(self) -> None:
        assert Circle(radius=1).area() == pytest.approx(math.pi)

    def test_negative_radius_gives_negative_perimeter(self) -> None:
        assert Circle(radius=-1).perimeter() == pytest.approx(-2 * math.pi)


# ---------------------------------------------------------------------------
# RightTriangle
# ---------------------------------------------------------------------------

class TestRightTriangle:
    def test_area(self) -> None:
        assert RightTriangle(base=10, height=5).area() == 25.0

    def test_perimeter(self) -> None:
        tri = RightTriangle(base=10, height=5)
        assert tri.perimeter() == pytest.approx(26.180340)
        assert tri.perimeter() == pytest.approx(10 + 5 + math.sqrt(125))

    def test_perimeter_of_3_4_5_triangle(self) -> None:
        assert RightTriangle(base=3, height=4).perimeter() == pytest.approx(12.0)


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------

class TestValueSemantics:
    @pytest.mark.parametrize(
        ("shape", "attr"),
        [
            (Rectangle(width=1, height=2), "width"),
            (Circle(radius=1), "radius"),
            (RightTriangle(base=1, height=2), "base"),
        ],
    )
    def test_frozen(self, shape: Shape, attr: str) -> None:
        with pytest.raises(AttributeError):
            setattr(shape, attr, 99)

    def test_equality_by_fields(self) -> None:
        assert Rectangle(width=3, height=4) == Rectangle(width=3, height=4)
        assert Rectangle(width=3, height=4) != Rectangle(width=4, height=3)

    def test_hashable(self) -> None:
        shapes = {Circle(radius=2), Circle(radius=2), Circle(radius=3)}
        assert len(shapes) == 2


# ---------------------------------------------------------------------------
# Shape protocol dispatch
# ---------------------------------------------------------------------------

class TestShapeInterface:
    @pytest.mark.parametrize(
        ("shape", "expected_area"),
        [
            (Rectangle(width=12, height=6), 72.0),
            (Circle(radius=10), 314.1592653589793),
            (RightTriangle(base=12, height=6), 36.0),
        ],
        ids=["Rectangle", "Circle", "RightTriangle"],
    )
    def test_area_through_interface(self, shape: Shape, expected_area: float) -> None:
        assert shape.area() == pytest.approx(expected_area)

    @pytest.mark.parametrize(
        "shape",
        [Rectangle(width=12, height=6), Circle(radius=10), RightTriangle(base=12, height=6)],
    )
    def test_satisfies_protocol(self, shape: object) -> None:
        assert isinstance(shape, Shape)

    def test_unrelated_object_does_not_satisfy_protocol(self) -> None:
        assert not isinstance(object(), Shape)

    def test_structural_shape_without_inheritance(self) -> None:
        class Square:
            def __init__(self, side: float) -> None:
                self.side = side

            def area(self) -> float:
                return self.side * self.side

            def perimeter(self) -> float:
                return 4 * self.side

        sq = Square(3)
        assert isinstance(sq, Shape)
        assert measure(sq) == ShapeMeasurement(kind="Square", area=9, perimeter=12)


# ---------------------------------------------------------------------------
# measure()
# ---------------------------------------------------------------------------

class TestMeasure:
    def test_matches_direct_calls(self) -> None:
        for shape in (Rectangle(width=10, height=5), Circle(radius=10), RightTriangle(base=10, height=5)):
            result = measure(shape)
            assert result.area == shape.area()
            assert result.perimeter == shape.perimeter()

    def test_kind_is_class_name(self) -> None:
        assert measure(RightTriangle(base=1, height=1)).kind == "RightTriangle"

    def test_measurement_is_frozen(self) -> None:
        result = measure(Circle(radius=1))
        with pytest.raises(AttributeError):
            result.area = 0.0  # type: ignore[misc]
