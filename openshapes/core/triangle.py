from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .shape import Shape, as_outline, vertex

Vertex = Tuple[float, float]


@dataclass(frozen=True)
class Triangle(Shape):
    a: Vertex = (0.0, 0.0)
    b: Vertex = (1.0, 0.0)
    c: Vertex = (0.0, 1.0)

    def __post_init__(self):
        # frozen: normalise lists/arrays to float tuples
        for name in ("a", "b", "c"):
            object.__setattr__(
                self, name, vertex(getattr(self, name), f"Triangle vertex '{name}'")
            )

    def draw(self) -> str:
        return "Drawing a triangle"

    def outline(self) -> np.ndarray:
        return as_outline([self.a, self.b, self.c])

    @property
    def area(self) -> float:
        (ax, ay), (bx, by), (cx, cy) = self.a, self.b, self.c
        return abs((bx - ax) * (cy - ay) - (cx - ax) * (by - ay)) / 2.0
