from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Optional

from openshapes.common import settings
from openshapes.core.shape import ensure_shape
from openshapes.render.renderer import Renderer


class Scene:
    """Ordered collection of shapes, drawn in insertion order."""

    def __init__(self, shapes: Iterable[Any] = ()):
        self.objects: List[Any] = []
        for shape in shapes:
            self.add(shape)

    def add(self, obj):
        self.objects.append(ensure_shape(obj))
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __repr__(self) -> str:
        kinds = ", ".join(type(o).__name__ for o in self.objects)
        return f"Scene([{kinds}])"

    def draw_all(self, renderer: Optional[Renderer] = None) -> None:
        (renderer or Renderer()).draw_all(self.objects)

    def visualise(self, backend=None, **style):
        from openshapes.visualise import VisualisationRegistry, visualise

        name = backend or settings.get().BACKEND
        canvas_arg = VisualisationRegistry.get(name).canvas_arg
        canvas = style.pop(canvas_arg, None)
        for obj in self.objects:
            # duck-typed members have no outline; dispatch raises TypeMismatch
            canvas = visualise(obj, backend=name, **{canvas_arg: canvas}, **style)
        return canvas
