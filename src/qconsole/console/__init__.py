from __future__ import annotations

from qconsole.console.commands import CommandRegistry
from qconsole.console.core import Console
from qconsole.console.cvars import Cvar, CvarRegistry
from qconsole.console.errors import (
    ConsoleError,
    DuplicateNameError,
    ParseFailureError,
    UnknownCommandError,
    UnknownVariableError,
)
from qconsole.console.history import History
from qconsole.console.keys import Key
from qconsole.console.output import ConsoleOutput
from qconsole.console.text_editor import TextEditor

__all__ = [
    "CommandRegistry",
    "Console",
    "ConsoleError",
    "ConsoleOutput",
    "Cvar",
    "CvarRegistry",
    "DuplicateNameError",
    "History",
    "Key",
    "ParseFailureError",
    "TextEditor",
    "UnknownCommandError",
    "UnknownVariableError",
]
