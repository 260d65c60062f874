from __future__ import annotations
import sys
from typing import Callable, List, Optional, TextIO

Sink = Callable[[str], None]


class StreamSink:
    """Writes each line to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # stdout is looked up per write so redirection after construction works
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, line: str) -> None:
        self.stream.write(line + "\n")


class ListSink:
    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)

    def clear(self) -> None:
        self.lines.clear()
