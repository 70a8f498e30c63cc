from __future__ import annotations

from direct.showbase.DirectObject import DirectObject

from qconsole.console.core import Console
from qconsole.console.keys import ARROW_KEYS, Key

KEYSTROKE_EVENT = "keystroke"


class ConsoleInputBinding(DirectObject):
    """
    Feeds Panda3D window events into a Console.

    Character input comes from the button thrower's keystroke event (already
    layout-resolved, including "\\r", "\\x08" and "\\x7f"); arrows come from
    their button events, held-key repeats included.
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self.enabled = False

    def install(self, base) -> None:
        """Turn on keystroke events for the main window and start listening."""
        for thrower in list(getattr(base, "buttonThrowers", None) or []):
            thrower.node().setKeystrokeEvent(KEYSTROKE_EVENT)
        self.enable()

    def enable(self) -> None:
        if self.enabled:
            return
        self.accept(KEYSTROKE_EVENT, self._on_keystroke)
        for key in ARROW_KEYS:
            self.accept(key.value, self._on_key, [key])
            self.accept(f"{key.value}-repeat", self._on_key, [key])
        self.enabled = True

    def disable(self) -> None:
        self.ignoreAll()
        self.enabled = False

    def _on_keystroke(self, keyname: str) -> None:
        s = str(keyname or "")
        if len(s) != 1:
            return
        self.console.send_char(s)

    def _on_key(self, key: Key) -> None:
        self.console.send_key(key)
