from .core import (
    BackendNotFound,
    Circle,
    Rectangle,
    Shape,
    ShapeError,
    Triangle,
    TypeMismatch,
    is_shape,
)
from .render import ListSink, Renderer, StreamSink
from .scene import Scene

__version__ = "0.1.0"

__all__ = [
    "Shape",
    "Rectangle",
    "Circle",
    "Triangle",
    "Renderer",
    "StreamSink",
    "ListSink",
    "Scene",
    "is_shape",
    "ShapeError",
    "TypeMismatch",
    "BackendNotFound",
]
