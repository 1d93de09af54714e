"""Circles and triangles, with an adapter converting one into the other of equal area."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from enum import IntEnum


class ShapeType(IntEnum):
    CIRCLE = 0
    TRIANGLE = 1


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180


class Shape(ABC):
    """A plane shape with an area and a perimeter."""

    shape_type: ShapeType

    @abstractmethod
    def calculate_area(self) -> float:
        """The area of the shape."""

    @abstractmethod
    def calculate_perimeter(self) -> float:
        """The length of the shape's boundary."""

    @abstractmethod
    def describe(self) -> list[str]:
        """Lines describing the shape's dimensions."""

    @property
    def area(self) -> float:
        return self.calculate_area()

    @property
    def perimeter(self) -> float:
        return self.calculate_perimeter()

    def print(self) -> None:
        """Write the description to standard output."""
        for line in self.describe():
            print(line)


class Circle(Shape):
    """A circle; the unit circle by default."""

    shape_type = ShapeType.CIRCLE

    def __init__(self, radius: float = 1.0) -> None:
        self.radius = radius

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius!r})"

    def calculate_area(self) -> float:
        return math.pi * self.radius**2

    def calculate_perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def describe(self) -> list[str]:
        return [
            "Circle's variables!",
            f"radius: {self.radius:g}",
            f"perimeter: {self.perimeter:g}",
            f"area: {self.area:g}",
        ]


class Triangle(Shape):
    """A triangle given by two sides and the angle between them.

    The default is the unit right triangle. The angle is taken as its absolute
    value and brought into the range 0..360 degrees, then kept in radians.
    """

    shape_type = ShapeType.TRIANGLE

    def __init__(
        self, side1: float = 1.0, side2: float = 1.0, angle_in_degrees: float = 90
    ) -> None:
        self.side1 = side1
        self.side2 = side2
        degrees = abs(angle_in_degrees)
        if degrees > 360:
            degrees -= 360 * math.ceil(degrees / 360 - 1)
        self.angle = degrees_to_radians(degrees)

    def __repr__(self) -> str:
        return (
            f"Triangle(side1={self.side1!r}, side2={self.side2!r}, "
            f"angle={self.angle!r})"
        )

    def calculate_hypotenuse(self) -> float:
        """The third side, by the law of cosines."""
        return abs(
            math.sqrt(
                self.side1**2
                + self.side2**2
                - 2 * self.side1 * self.side2 * math.cos(self.angle)
            )
        )

    @property
    def hypotenuse(self) -> float:
        return self.calculate_hypotenuse()

    def calculate_area(self) -> float:
        return self.side1 * self.side2 * math.sin(self.angle) / 2

    def calculate_perimeter(self) -> float:
        return self.side1 + self.side2 + self.hypotenuse

    def describe(self) -> list[str]:
        return [
            "Triangle's variables!",
            f"side1: {self.side1:g}",
            f"side2: {self.side2:g}",
            f"angle: {self.angle:g}",
            f"hypotenuse: {self.hypotenuse:g}",
            f"perimeter: {self.perimeter:g}",
            f"area: {self.area:g}",
        ]


class ShapeAdapter:
    """Pairs a shape with a shape of the other kind having the same area."""

    def __init__(self, shape: Shape) -> None:
        if isinstance(shape, Circle):
            print("ShapeAdapter converts circle to triangle")
            self.circle = shape
            self.triangle = self.convert_circle_to_triangle(shape)
        elif isinstance(shape, Triangle):
            print("ShapeAdapter converts triangle to circle")
            self.triangle = shape
            self.circle = self.convert_triangle_to_circle(shape)
        else:
            raise TypeError(f"cannot adapt {type(shape).__name__}")

    def convert_circle_to_triangle(self, circle: Circle) -> Triangle:
        """An isosceles right triangle with the circle's area."""
        side = math.sqrt(2 * circle.area)
        return Triangle(side, side)

    def convert_triangle_to_circle(self, triangle: Triangle) -> Circle:
        """A circle with the triangle's area."""
        return Circle(math.sqrt(triangle.area / math.pi))


def main(argv: list[str] | None = None) -> int:
    """Convert a unit triangle and a unit circle into each other."""
    if argv is None:
        argv = sys.argv[1:]

    triangle = Triangle()
    triangle.print()
    circle = Circle()
    circle.print()

    from_triangle = ShapeAdapter(triangle)
    from_triangle.triangle.print()
    from_triangle.circle.print()

    from_circle = ShapeAdapter(circle)
    from_circle.circle.print()
    from_circle.triangle.print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())