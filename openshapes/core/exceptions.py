class ShapeError(Exception):
    """Base error for everything raised by openshapes."""


class TypeMismatch(ShapeError, TypeError):
    """A value without the Shape capability was used as a shape."""


class BackendNotFound(ShapeError, LookupError):
    """No raster backend is registered under the requested name."""
