from __future__ import annotations

from collections import deque
from typing import Callable

OutputSink = Callable[[str], None]


class ConsoleOutput:
    """Bounded output log; every printed line is also forwarded to `sink` when set."""

    def __init__(self, *, max_lines: int = 400, sink: OutputSink | None = None) -> None:
        if int(max_lines) < 1:
            raise ValueError("max_lines must be >= 1")
        self._lines: deque[str] = deque(maxlen=int(max_lines))
        self._sink = sink

    def println(self, msg: str) -> None:
        s = str(msg)
        self._lines.append(s)
        if self._sink is not None:
            self._sink(s)

    def lines(self) -> list[str]:
        return list(self._lines)

    def drain(self) -> list[str]:
        if not self._lines:
            return []
        out = list(self._lines)
        self._lines.clear()
        return out

    def clear(self) -> None:
        self._lines.clear()
