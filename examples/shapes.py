"""Geometric shapes dispatched through a constant interface.

Circle and Rectangle share no base class. Both are bound to the Shape
interface through read-only pointers and measured through its method table.

Run:
    python examples/shapes.py
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

from shapebind import ConstPtr, Opaque, bind, implements, invoke


class ShapeTable:
    area: Callable[[ConstPtr[Opaque]], float]
    perimeter: Callable[[ConstPtr[Opaque]], float]


class Shape:
    ptr: ConstPtr[Opaque]
    vtable: ShapeTable

    def area(self) -> float:
        return invoke(self, "area")  # type: ignore[return-value]

    def perimeter(self) -> float:
        return invoke(self, "perimeter")  # type: ignore[return-value]


@implements(Shape)
@dataclass(frozen=True)
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@implements(Shape)
@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


def measure(shapes: list[Shape]) -> list[tuple[float, float]]:
    """Area and perimeter of every shape, in order."""
    return [(shape.area(), shape.perimeter()) for shape in shapes]


def main() -> None:
    shapes = [
        bind(Shape, ConstPtr(Circle(radius=5.0))),
        bind(Shape, ConstPtr(Rectangle(width=4.0, height=6.0))),
    ]
    for shape, (area, perimeter) in zip(shapes, measure(shapes), strict=True):
        name = type(shape.ptr.target).__name__
        print(f"{name}: area={area:.2f} perimeter={perimeter:.2f}")


if __name__ == "__main__":
    main()
