from __future__ import annotations

import logging
from collections import deque

from qconsole.console.commands import CommandRegistry
from qconsole.console.cvars import CvarRegistry
from qconsole.console.history import History
from qconsole.console.keys import Key
from qconsole.console.output import ConsoleOutput
from qconsole.console.text_editor import TextEditor

logger = logging.getLogger(__name__)

CHAR_SUBMIT = "\r"
CHAR_BACKSPACE = "\x08"
CHAR_DELETE = "\x7f"
CHAR_TAB = "\t"


def tokenize(line: str) -> list[str]:
    # Plain whitespace split: no quoting, no ';' separators.
    return str(line or "").split()


class Console:
    """
    Interactive console: live edit line, history, output log and dispatch.

    Driven synchronously by the host loop through `send_char`/`send_key`; a
    committed line is dispatched immediately. Lines queued with `stuff_text`
    (scripts, bindings) run on the next `execute()`, once per frame.
    """

    def __init__(
        self,
        *,
        cmds: CommandRegistry,
        cvars: CvarRegistry,
        output: ConsoleOutput | None = None,
        history_max: int | None = None,
    ) -> None:
        self.cmds = cmds
        self.cvars = cvars
        self.output = output if output is not None else ConsoleOutput()
        self._input = TextEditor()
        self._history = History(max_lines=history_max)
        self._pending: deque[str] = deque()

    @property
    def input(self) -> TextEditor:
        return self._input

    @property
    def history(self) -> History:
        return self._history

    def println(self, msg: str) -> None:
        self.output.println(msg)

    def send_char(self, c: str) -> None:
        if c == CHAR_SUBMIT:
            self._commit()
        elif c == CHAR_BACKSPACE:
            self._input.backspace()
        elif c == CHAR_DELETE:
            self._input.delete()
        elif c == CHAR_TAB:
            # TODO: complete command/cvar names from the registries.
            pass
        else:
            self._input.insert(c)
        logger.debug("console input: %s", self._input.debug_string())

    def send_key(self, key: Key) -> None:
        if key is Key.UP:
            line = self._history.line_up()
            if line is not None:
                self._input.set_text(line)
        elif key is Key.DOWN:
            self._input.set_text(self._history.line_down())
        elif key is Key.RIGHT:
            self._input.cursor_right()
        elif key is Key.LEFT:
            self._input.cursor_left()
        else:
            return
        logger.debug("console input: %s", self._input.debug_string())

    def _commit(self) -> None:
        line = self._input.text
        argv = tokenize(line)
        if not argv:
            return
        self._history.add_line(line)
        self._input.clear()
        self.println(f"] {line}")
        self._dispatch(argv[0], argv[1:])

    def execute_line(self, line: str) -> bool:
        """Dispatch one line. Returns False for a blank line (nothing ran)."""
        argv = tokenize(line)
        if not argv:
            return False
        self._dispatch(argv[0], argv[1:])
        return True

    def _dispatch(self, name: str, args: list[str]) -> None:
        if self.cmds.has(name):
            try:
                self.cmds.execute(name, args)
            except Exception as e:
                logger.exception("console command %r failed", name)
                self.println(f"error in {name}: {e}")
            return

        if self.cvars.has(name):
            if args:
                self.cvars.set_value(name, args[0])
            self.println(f'{name} "{self.cvars.get(name)}"')
            return

        self.println(f"unknown command: {name}")

    def stuff_text(self, text: str) -> None:
        """Queue command lines (newline separated) for the next `execute()`."""
        for raw in str(text or "").splitlines():
            s = raw.strip()
            if s:
                self._pending.append(s)

    def pending(self) -> list[str]:
        return list(self._pending)

    def execute(self) -> int:
        """Run every queued line. Lines queued while running wait for the next frame."""
        n = len(self._pending)
        ran = 0
        for _ in range(n):
            self.execute_line(self._pending.popleft())
            ran += 1
        return ran

    def debug_string(self) -> str:
        return self._input.debug_string()
