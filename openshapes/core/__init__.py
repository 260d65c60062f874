from .exceptions import BackendNotFound, ShapeError, TypeMismatch
from .shape import Shape, ensure_shape, is_shape
from .rectangle import Rectangle
from .circle import Circle
from .triangle import Triangle

__all__ = [
    "Shape",
    "Rectangle",
    "Circle",
    "Triangle",
    "is_shape",
    "ensure_shape",
    "ShapeError",
    "TypeMismatch",
    "BackendNotFound",
]
