from __future__ import annotations

import math

import numpy as np
import pytest

from openshapes import Circle, Rectangle, Shape, ShapeError, Triangle, is_shape


@pytest.mark.parametrize(
    "shape, text",
    [
        (Rectangle(), "Drawing a rectangle"),
        (Circle(), "Drawing a circle"),
        (Triangle(), "Drawing a triangle"),
    ],
)
def test_draw_returns_fixed_text(shape: Shape, text: str) -> None:
    assert shape.draw() == text
    # repeated calls never change the result
    assert [shape.draw() for _ in range(3)] == [text] * 3


def test_draw_text_ignores_geometry() -> None:
    assert Rectangle(5, 5, 10, 20).draw() == Rectangle().draw()
    assert Circle(radius=7, segments=3).draw() == Circle().draw()


def test_variant_texts_are_distinct() -> None:
    texts = {Rectangle().draw(), Circle().draw(), Triangle().draw()}
    assert len(texts) == 3


def test_shape_is_abstract() -> None:
    with pytest.raises(TypeError):
        Shape()  # type: ignore[abstract]


def test_rectangle_outline_and_area() -> None:
    r = Rectangle(1, 2, 3, 4)
    np.testing.assert_array_equal(
        r.outline(), [[1, 2], [4, 2], [4, 6], [1, 6]]
    )
    assert r.outline().dtype == np.float64
    assert r.area == 12.0


def test_circle_outline() -> None:
    c = Circle(cx=10, cy=10, radius=2, segments=8)
    pts = c.outline()
    assert pts.shape == (8, 2)
    np.testing.assert_allclose(pts[0], [12.0, 10.0])
    np.testing.assert_allclose(np.hypot(pts[:, 0] - 10, pts[:, 1] - 10), 2.0)
    assert c.area == pytest.approx(math.pi * 4)


def test_triangle_normalises_vertices() -> None:
    t = Triangle([0, 0], np.array([4, 0]), (0, 3))
    assert t.b == (4.0, 0.0)
    assert t.outline().shape == (3, 2)
    assert t.area == pytest.approx(6.0)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Rectangle(width=0),
        lambda: Rectangle(height=-1),
        lambda: Circle(radius=0),
        lambda: Circle(segments=2),
        lambda: Triangle(a=(0, 0, 0)),
        lambda: Triangle(a=5),
        lambda: Triangle(a=("x", 0)),
        lambda: Triangle(b=(0, math.inf)),
        lambda: Rectangle(width="3"),
        lambda: Rectangle(width=math.nan),
        lambda: Rectangle(x=True),
        lambda: Circle(radius=math.nan),
        lambda: Circle(cx=math.inf),
        lambda: Circle(segments=3.5),
        lambda: Circle(segments="8"),
    ],
)
def test_invalid_geometry_raises(factory) -> None:
    with pytest.raises(ShapeError):
        factory()


def test_shapes_are_frozen_values() -> None:
    assert Rectangle(0, 0, 2, 2) == Rectangle(0, 0, 2, 2)
    with pytest.raises(AttributeError):
        Rectangle().width = 3  # type: ignore[misc]


def test_geometry_type_from_class_name(hexagon) -> None:
    assert Rectangle().geometry_type() == "rectangle"
    assert hexagon.geometry_type() == "hexagon"


def test_is_shape_accepts_duck_types() -> None:
    class Duck:
        def draw(self):
            return "Drawing a duck"

    assert is_shape(Circle())
    assert is_shape(Duck())
    assert not is_shape("Drawing a string")
    assert not is_shape(type("NoDraw", (), {"draw": "not callable"})())


def test_valid_geometry_is_stored_as_floats() -> None:
    r = Rectangle(np.int64(1), 2, 3, 4)
    assert (r.x, r.width) == (1.0, 3.0)
    assert Circle(segments=np.int32(5)).outline().shape == (5, 2)


def test_is_shape_rejects_classes() -> None:
    assert not is_shape(Circle)
    assert not is_shape(Shape)
