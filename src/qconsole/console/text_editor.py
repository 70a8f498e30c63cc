from __future__ import annotations


class TextEditor:
    """
    The line currently being edited in the console.

    Cursor is an insertion index in [0, len(text)]; every operation clamps it
    back into that range, so out-of-range moves are silent no-ops.
    """

    def __init__(self, text: str = "") -> None:
        self._text: list[str] = list(text)
        self._cursor: int = len(self._text)

    @property
    def text(self) -> str:
        return "".join(self._text)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def set_text(self, text: str) -> None:
        """Replace the whole line and move the cursor to the end."""
        self._text = list(str(text))
        self._cursor = len(self._text)

    def insert(self, c: str) -> None:
        # One list element per character, even for pasted strings.
        for ch in str(c):
            self._text.insert(self._cursor, ch)
            self.cursor_right()

    def cursor_right(self) -> None:
        if self._cursor < len(self._text):
            self._cursor += 1

    def cursor_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def delete(self) -> None:
        """Delete the character under the cursor (forward delete)."""
        if self._cursor < len(self._text):
            del self._text[self._cursor]

    def backspace(self) -> None:
        """Delete the character left of the cursor."""
        if self._cursor > 0:
            del self._text[self._cursor - 1]
            self._cursor -= 1

    def clear(self) -> None:
        self._text.clear()
        self._cursor = 0

    def debug_string(self) -> str:
        return f"{''.join(self._text[: self._cursor])}_{''.join(self._text[self._cursor :])}"
