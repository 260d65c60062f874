from abc import ABC, abstractmethod


class Backend(ABC):
    """
    Base raster backend contract.

    A backend only needs ``shape.outline()``; it never branches on the
    shape's type.
    """

    name: str
    # keyword the backend reads its canvas from and returns it under
    canvas_arg: str = "image"

    @abstractmethod
    def draw_shape(self, shape, **style):
        raise NotImplementedError
