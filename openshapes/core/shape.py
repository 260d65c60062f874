from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional
import math
import numbers

import numpy as np

from .exceptions import ShapeError, TypeMismatch


class Shape(ABC):
    """
    Anything that can describe how it is drawn.

    New kinds of shape are added by subclassing.
    """

    @abstractmethod
    def draw(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def outline(self) -> np.ndarray:
        """
        Boundary vertices as an (N, 2) float64 array, in drawing order.
        The polygon is implicitly closed.
        """
        raise NotImplementedError


    # --------------------
    # Drawable Protocol
    # --------------------

    def geometry_type(self) -> str:
        return type(self).__name__.lower()

    def visualise(self, backend: Optional[str] = None, **style) -> Any:
        from openshapes.visualise.dispatch import visualise
        return visualise(self, backend=backend, **style)


def is_shape(obj: Any) -> bool:
    if isinstance(obj, Shape):
        return True
    # a class has a callable draw too, but it is not a value to draw
    if isinstance(obj, type):
        return False
    return callable(getattr(obj, "draw", None))


def ensure_shape(obj: Any) -> Any:
    if not is_shape(obj):
        raise TypeMismatch(
            f"{type(obj).__name__!r} object has no draw() and is not a Shape."
        )
    return obj


def as_outline(vertices) -> np.ndarray:
    arr = np.asarray(vertices, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ShapeError(
            f"outline must have shape (N, 2), got {arr.shape}"
        )
    return arr


# --------------------
# Geometry Validation
# --------------------

def finite_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ShapeError(f"{name} must be a real number, got {value!r}.")
    val = float(value)
    if not math.isfinite(val):
        raise ShapeError(f"{name} must be finite, got {value!r}.")
    return val


def positive_number(value: Any, name: str) -> float:
    val = finite_number(value, name)
    if val <= 0:
        raise ShapeError(f"{name} must be positive, got {value!r}.")
    return val


def vertex(value: Any, name: str) -> tuple:
    try:
        coords = tuple(value)
    except TypeError:
        raise ShapeError(f"{name} must be an (x, y) pair, got {value!r}.") from None
    if len(coords) != 2:
        raise ShapeError(f"{name} must be 2D, got {coords}.")
    return tuple(finite_number(v, name) for v in coords)
