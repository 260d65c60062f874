from __future__ import annotations
from dataclasses import dataclass
from typing import Union
import math
import numbers

import numpy as np

from .exceptions import ShapeError
from .shape import Shape, as_outline, finite_number, positive_number

Number = Union[int, float]


@dataclass(frozen=True)
class Circle(Shape):
    cx: Number = 0.0
    cy: Number = 0.0
    radius: Number = 1.0
    segments: int = 64

    def __post_init__(self):
        object.__setattr__(self, "cx", finite_number(self.cx, "Circle cx"))
        object.__setattr__(self, "cy", finite_number(self.cy, "Circle cy"))
        object.__setattr__(self, "radius", positive_number(self.radius, "Circle radius"))
        segments = self.segments
        if isinstance(segments, bool) or not isinstance(segments, numbers.Integral):
            raise ShapeError(f"Circle segments must be an integer, got {segments!r}.")
        if segments < 3:
            raise ShapeError(
                f"Circle needs at least 3 segments, got {segments}."
            )
        object.__setattr__(self, "segments", int(segments))

    def draw(self) -> str:
        return "Drawing a circle"

    def outline(self) -> np.ndarray:
        # Polygonal approximation, first vertex at angle 0
        t = np.linspace(0.0, 2.0 * np.pi, self.segments, endpoint=False)
        xs = self.cx + self.radius * np.cos(t)
        ys = self.cy + self.radius * np.sin(t)
        return as_outline(np.stack([xs, ys], axis=1))

    @property
    def area(self) -> float:
        return math.pi * self.radius ** 2
