from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from qconsole.console.errors import DuplicateNameError, UnknownCommandError

logger = logging.getLogger(__name__)

CommandHandler = Callable[[list[str]], None]


@dataclass(frozen=True)
class _Command:
    name: str
    help: str
    handler: CommandHandler


class CommandRegistry:
    """
    Name -> handler table for console commands.

    Handlers receive the argument tokens (command name excluded) and report
    through side effects only: cvar writes, console output, calls into whatever
    they captured at registration time.
    """

    def __init__(self) -> None:
        self._cmds: dict[str, _Command] = {}

    def register(self, name: str, handler: CommandHandler, *, help: str = "") -> None:
        n = str(name or "")
        if not n.strip():
            raise ValueError("command name is required")
        if n in self._cmds:
            logger.error('Command "%s" already registered.', n)
            raise DuplicateNameError("command", n)
        self._cmds[n] = _Command(name=n, help=str(help or ""), handler=handler)

    def has(self, name: str) -> bool:
        return str(name) in self._cmds

    def execute(self, name: str, args: list[str]) -> None:
        cmd = self._cmds.get(str(name))
        if cmd is None:
            raise UnknownCommandError(str(name))
        cmd.handler(list(args))

    def list_commands(self) -> list[tuple[str, str]]:
        return sorted(((c.name, c.help) for c in self._cmds.values()), key=lambda x: x[0])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._cmds

    def __len__(self) -> int:
        return len(self._cmds)
