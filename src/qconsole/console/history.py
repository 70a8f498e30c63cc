from __future__ import annotations

from collections import deque


class History:
    """
    Previously submitted console lines, most recent first.

    The navigation cursor counts how far "up" the user has browsed: 0 means the
    live (blank) prompt, N means the N-th most recent line is shown.
    """

    def __init__(self, *, max_lines: int | None = None) -> None:
        # None keeps every line; a bound evicts the oldest ones.
        if max_lines is not None and int(max_lines) < 1:
            raise ValueError("max_lines must be >= 1")
        self._lines: deque[str] = deque(maxlen=None if max_lines is None else int(max_lines))
        self._cursor: int = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._lines)

    def lines(self) -> list[str]:
        return list(self._lines)

    def add_line(self, line: str) -> None:
        self._lines.appendleft(str(line))
        self._cursor = 0

    def line_up(self) -> str | None:
        """Step to the next older line; None when there is nothing further back."""
        if not self._lines or self._cursor >= len(self._lines):
            return None
        self._cursor += 1
        return self._lines[self._cursor - 1]

    def line_down(self) -> str:
        """Step to the next newer line; reaching the bottom yields the empty prompt."""
        if self._cursor > 0:
            self._cursor -= 1
        if self._cursor > 0:
            return self._lines[self._cursor - 1]
        return ""
