"""Shared fixtures: a capturing sink and a user-defined shape."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from openshapes import ListSink, Renderer, Shape


class Hexagon(Shape):
    """A variant that lives outside the library."""

    def draw(self) -> str:
        return "Drawing a hexagon"

    def outline(self) -> np.ndarray:
        t = np.linspace(0.0, 2.0 * np.pi, 6, endpoint=False)
        return np.stack([np.cos(t), np.sin(t)], axis=1)


@pytest.fixture()
def sink() -> ListSink:
    return ListSink()


@pytest.fixture()
def renderer(sink: ListSink) -> Renderer:
    return Renderer(sink=sink)


@pytest.fixture()
def hexagon() -> Hexagon:
    return Hexagon()
