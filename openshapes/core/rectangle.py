from __future__ import annotations
from dataclasses import dataclass
from typing import Union

import numpy as np

from .shape import Shape, as_outline, finite_number, positive_number

Number = Union[int, float]


@dataclass(frozen=True)
class Rectangle(Shape):
    x: Number = 0.0
    y: Number = 0.0
    width: Number = 1.0
    height: Number = 1.0

    def __post_init__(self):
        # frozen: store validated values as floats
        object.__setattr__(self, "x", finite_number(self.x, "Rectangle x"))
        object.__setattr__(self, "y", finite_number(self.y, "Rectangle y"))
        object.__setattr__(self, "width", positive_number(self.width, "Rectangle width"))
        object.__setattr__(self, "height", positive_number(self.height, "Rectangle height"))

    def draw(self) -> str:
        return "Drawing a rectangle"

    def outline(self) -> np.ndarray:
        x0, y0 = self.x, self.y
        x1, y1 = x0 + self.width, y0 + self.height
        return as_outline([[x0, y0], [x1, y0], [x1, y1], [x0, y1]])

    @property
    def area(self) -> float:
        return float(self.width * self.height)
