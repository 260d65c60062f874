from .base import Backend
from .dispatch import visualise
from .registry import VisualisationRegistry

try:
    from .opencv import OpenCVBackend
    VisualisationRegistry.register(OpenCVBackend())
except ModuleNotFoundError:
    pass

try:
    from .matplotlib import MatplotlibBackend
    VisualisationRegistry.register(MatplotlibBackend())
except ModuleNotFoundError:
    pass

__all__ = ["Backend", "VisualisationRegistry", "visualise"]
