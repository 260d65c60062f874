from .renderer import Renderer
from .sinks import ListSink, StreamSink

__all__ = ["Renderer", "ListSink", "StreamSink"]
