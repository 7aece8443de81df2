"""End-to-end test of examples/shapes.py."""

import math

import pytest

from examples.shapes import Circle, Rectangle, Shape, main, measure
from shapebind import ConformanceError, ConstPtr, Ptr, bind, check_implements, implements
from shapebind.domain.model.verdict import SUCCESS


class TestShapesExample:
    """Tests for the geometric shapes program."""

    def test_implementations_conform(self) -> None:
        assert check_implements(Shape, Circle) is SUCCESS
        assert check_implements(Shape, Rectangle) is SUCCESS

    def test_measure(self) -> None:
        shapes = [
            bind(Shape, ConstPtr(Circle(radius=1.0))),
            bind(Shape, ConstPtr(Rectangle(width=2.0, height=3.0))),
        ]
        (circle_area, circle_perimeter), (rect_area, rect_perimeter) = measure(shapes)
        assert circle_area == pytest.approx(math.pi)
        assert circle_perimeter == pytest.approx(2 * math.pi)
        assert rect_area == 6.0
        assert rect_perimeter == 10.0

    def test_mutable_pointer_accepted_by_const_shape(self) -> None:
        shape = bind(Shape, Ptr(Rectangle(width=1.0, height=1.0)))
        assert type(shape.ptr) is ConstPtr
        assert shape.area() == 1.0

    def test_main_prints_measurements(self, capsys: pytest.CaptureFixture[str]) -> None:
        main()
        out = capsys.readouterr().out
        assert "Circle: area=78.54 perimeter=31.42" in out
        assert "Rectangle: area=24.00 perimeter=20.00" in out

    def test_wrong_return_type_rejected(self) -> None:
        with pytest.raises(ConformanceError, match="wrong return type: expected float, got int"):

            @implements(Shape)
            class Square:
                def area(self) -> int:
                    return 1

                def perimeter(self) -> float:
                    return 4.0
