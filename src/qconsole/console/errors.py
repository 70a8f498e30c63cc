from __future__ import annotations


class ConsoleError(Exception):
    """Base class for recoverable console/registry errors."""


class DuplicateNameError(ConsoleError, ValueError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} already registered: {name}")
        self.kind = kind
        self.name = name


class UnknownCommandError(ConsoleError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown command: {name}")
        self.name = name


class UnknownVariableError(ConsoleError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown variable: {name}")
        self.name = name


class ParseFailureError(ConsoleError, ValueError):
    def __init__(self, name: str, value: str, typ: str) -> None:
        super().__init__(f"{name}: cannot parse {value!r} as {typ}")
        self.name = name
        self.value = value
        self.typ = typ
