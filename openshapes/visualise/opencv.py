import numpy as np
import cv2

from openshapes.common import settings
from .base import Backend


class OpenCVBackend(Backend):
    name = "opencv"
    canvas_arg = "image"

    def _ensure_canvas(self, image, size):
        if image is None:
            if size is None:
                n = settings.get().CANVAS_SIZE
                size = (n, n)
            return np.zeros((*size, 3), dtype=np.uint8)
        return image

    def draw_shape(
        self,
        shape,
        image=None,
        color=(0, 255, 0),
        thickness=2,
        fill=False,
        canvas_size=None,
        scale=1.0,
        origin=(0, 0),
        **_,
    ):
        image = self._ensure_canvas(image, canvas_size)
        pts = shape.outline() * scale + np.asarray(origin, dtype=np.float64)
        pts = np.rint(pts).astype(np.int32)

        if fill:
            cv2.fillPoly(image, [pts], color)
        else:
            cv2.polylines(image, [pts], True, color, thickness)

        return image
