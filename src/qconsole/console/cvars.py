from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Callable

from qconsole.console.errors import DuplicateNameError, ParseFailureError, UnknownVariableError

logger = logging.getLogger(__name__)

InfoListener = Callable[[str, str], None]


@dataclass
class Cvar:
    """
    A configuration variable.

    `archive` cvars are written to the settings file; `info` cvars feed the
    serverinfo/userinfo string. Both flags are fixed at registration.
    """

    name: str
    value: str
    default: str
    archive: bool = False
    info: bool = False


def parse_bool(value: str) -> bool:
    v = str(value or "").strip().lower()
    if v in ("1", "true", "on", "yes", "y"):
        return True
    if v in ("0", "false", "off", "no", "n"):
        return False
    raise ValueError(f"invalid bool: {value!r}")


def _parse_value(value: str, typ: type) -> Any:
    if typ is str:
        return str(value)
    if typ is bool:
        return parse_bool(value)
    if typ is int:
        return int(str(value).strip())
    if typ is float:
        return float(str(value).strip())
    raise TypeError(f"unsupported cvar type: {typ!r}")


class CvarRegistry:
    def __init__(self) -> None:
        self._cvars: dict[str, Cvar] = {}
        self._info_listeners: list[InfoListener] = []
        self._info_changed: list[str] = []

    def _insert(self, name: str, default: str, *, archive: bool, info: bool) -> None:
        n = str(name or "")
        if not n.strip():
            raise ValueError("cvar name is required")
        if n in self._cvars:
            logger.error('Cvar "%s" already registered.', n)
            raise DuplicateNameError("cvar", n)
        d = str(default)
        self._cvars[n] = Cvar(name=n, value=d, default=d, archive=bool(archive), info=bool(info))

    def register(self, name: str, default: str) -> None:
        self._insert(name, default, archive=False, info=False)

    def register_archive(self, name: str, default: str) -> None:
        """Register a cvar whose value is persisted across sessions."""
        self._insert(name, default, archive=True, info=False)

    def register_updateinfo(self, name: str, default: str) -> None:
        """Register a cvar whose changes must be reflected in the info string."""
        self._insert(name, default, archive=False, info=True)

    def register_archive_updateinfo(self, name: str, default: str) -> None:
        self._insert(name, default, archive=True, info=True)

    def has(self, name: str) -> bool:
        return str(name) in self._cvars

    def get_cvar(self, name: str) -> Cvar:
        cvar = self._cvars.get(str(name))
        if cvar is None:
            raise UnknownVariableError(str(name))
        return cvar

    def get(self, name: str) -> str:
        return self.get_cvar(name).value

    def get_value(self, name: str, typ: type = float) -> Any:
        """
        Return the current value parsed as `typ` (float, int, bool or str).

        Raises UnknownVariableError for unregistered names and ParseFailureError
        when the stored string is not a valid `typ`.
        """

        cvar = self.get_cvar(name)
        try:
            return _parse_value(cvar.value, typ)
        except ValueError as e:
            raise ParseFailureError(cvar.name, cvar.value, getattr(typ, "__name__", str(typ))) from e

    def set_value(self, name: str, value: Any) -> None:
        cvar = self.get_cvar(name)
        cvar.value = str(value)
        if not cvar.info:
            return
        if cvar.name not in self._info_changed:
            self._info_changed.append(cvar.name)
        for listener in list(self._info_listeners):
            try:
                listener(cvar.name, cvar.value)
            except Exception:
                # The write stands; remaining listeners still run.
                logger.exception("info listener failed for cvar %r", cvar.name)

    def reset(self, name: str) -> None:
        cvar = self.get_cvar(name)
        self.set_value(cvar.name, cvar.default)

    def add_info_listener(self, listener: InfoListener) -> None:
        self._info_listeners.append(listener)

    def drain_info_changes(self) -> list[str]:
        """Return (and forget) the info cvars changed since the last call, in change order."""
        out = list(self._info_changed)
        self._info_changed.clear()
        return out

    def list(self) -> Iterator[tuple[str, str, bool, bool]]:
        for name in sorted(self._cvars):
            c = self._cvars[name]
            yield (c.name, c.value, c.archive, c.info)

    def archived(self) -> Iterator[tuple[str, str]]:
        for name, value, archive, _info in self.list():
            if archive:
                yield (name, value)

    def info_string(self) -> str:
        # "\key\value\key\value"; backslashes and quotes are not representable.
        parts: list[str] = []
        for name, value, _archive, info in self.list():
            if not info:
                continue
            v = value.replace("\\", "").replace('"', "")
            parts.append(f"\\{name}\\{v}")
        return "".join(parts)

    def __len__(self) -> int:
        return len(self._cvars)
