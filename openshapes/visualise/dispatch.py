import logging
from typing import Optional

from openshapes.common import settings
from openshapes.core.exceptions import TypeMismatch
from openshapes.core.shape import Shape
from .registry import VisualisationRegistry

logger = logging.getLogger(__name__)


def visualise(obj, backend: Optional[str] = None, **style):
    if not isinstance(obj, Shape):
        raise TypeMismatch(
            f"Cannot visualise {type(obj).__name__!r}: not a Shape."
        )
    name = backend or settings.get().BACKEND
    renderer = VisualisationRegistry.get(name)
    logger.debug("Visualising %s with %s", obj.geometry_type(), name)
    return renderer.draw_shape(obj, **style)
