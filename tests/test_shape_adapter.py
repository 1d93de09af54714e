import math

import pytest

from structural_patterns.shape_adapter import (
    Circle,
    ShapeAdapter,
    ShapeType,
    Triangle,
    degrees_to_radians,
    main,
)


def test_shape_type_values():
    assert Circle().shape_type == ShapeType.CIRCLE == 0
    assert Triangle().shape_type == ShapeType.TRIANGLE == 1


def test_unit_circle_area_is_pi():
    assert math.isclose(Circle().area, math.pi)


@pytest.mark.parametrize("radius", [0.5, 1.0, 3.0, 10.0])
def test_circle_perimeter_area_relation(radius):
    circle = Circle(radius)
    assert math.isclose(circle.perimeter**2, 4 * math.pi * circle.area)


def test_degrees_to_radians_half_turn():
    assert math.isclose(degrees_to_radians(180), math.pi)


@pytest.mark.parametrize("sides", [(1.0, 1.0), (3.0, 4.0), (2.5, 7.0)])
def test_right_triangle_satisfies_pythagoras(sides):
    triangle = Triangle(*sides)
    assert math.isclose(triangle.hypotenuse**2, sides[0] ** 2 + sides[1] ** 2)
    assert math.isclose(triangle.area, sides[0] * sides[1] / 2)


@pytest.mark.parametrize("angle", [450, -90, 810])
def test_angle_is_normalised(angle):
    assert math.isclose(Triangle(2, 3, angle).angle, Triangle(2, 3, 90).angle)


def test_full_turn_stays_full_turn():
    assert math.isclose(Triangle(1, 1, 720).angle, 2 * math.pi)


def test_triangle_perimeter_is_sum_of_sides():
    triangle = Triangle(2, 5, 60)
    assert math.isclose(
        triangle.perimeter, triangle.side1 + triangle.side2 + triangle.hypotenuse
    )


def test_adapter_from_circle_keeps_area():
    circle = Circle(2.0)
    adapter = ShapeAdapter(circle)
    assert adapter.circle is circle
    assert math.isclose(adapter.triangle.area, circle.area)
    assert math.isclose(adapter.triangle.side1, adapter.triangle.side2)


def test_adapter_from_triangle_keeps_area():
    triangle = Triangle(3, 4, 30)
    adapter = ShapeAdapter(triangle)
    assert adapter.triangle is triangle
    assert math.isclose(adapter.circle.area, triangle.area)


def test_round_trip_preserves_area():
    circle = Circle(1.7)
    triangle = ShapeAdapter(circle).triangle
    back = ShapeAdapter(triangle).circle
    assert math.isclose(back.radius, circle.radius)


def test_adapter_rejects_other_objects():
    with pytest.raises(TypeError):
        ShapeAdapter("square")


def test_describe_headers():
    assert Circle().describe()[0] == "Circle's variables!"
    assert Triangle().describe()[0] == "Triangle's variables!"
    assert Circle(2).describe()[1] == "radius: 2"


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ShapeAdapter converts circle to triangle" in out
    assert "ShapeAdapter converts triangle to circle" in out