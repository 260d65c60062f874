from __future__ import annotations
import logging
from typing import Any, Iterable, List, Optional

from openshapes.core.exceptions import TypeMismatch
from openshapes.core.shape import ensure_shape
from .sinks import Sink, StreamSink

logger = logging.getLogger(__name__)


class Renderer:
    """
    Draws any sequence of shapes through their own ``draw()``.

    Knows nothing about concrete shape types: a new shape class shows up in
    the output without a change here.
    """

    def __init__(self, sink: Optional[Sink] = None):
        self.sink = sink if sink is not None else StreamSink()

    def render(self, shapes: Iterable[Any]) -> List[str]:
        """Return the drawn lines, in input order, without writing them."""
        items = [ensure_shape(s) for s in shapes]
        lines = []
        for shape in items:
            text = shape.draw()
            if not isinstance(text, str):
                raise TypeMismatch(
                    f"{type(shape).__name__}.draw() returned "
                    f"{type(text).__name__}, expected str."
                )
            lines.append(text)
        return lines

    def draw_all(self, shapes: Iterable[Any]) -> None:
        lines = self.render(shapes)
        logger.debug("Drawing %d shape(s)", len(lines))
        for line in lines:
            self.sink(line)
