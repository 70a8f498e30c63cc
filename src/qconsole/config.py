"""Persisted cvar settings stored at ~/.qconsole/vars.rc."""

from __future__ import annotations

import logging
import os
import secrets
import shlex
from pathlib import Path

from qconsole.console.cvars import CvarRegistry

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "vars.rc"


def config_dir() -> Path:
    override = os.environ.get("QCONSOLE_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".qconsole"


def config_path() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def read_exec_lines(path: Path) -> list[str]:
    """Non-empty, non-comment lines of a script file ([] if unreadable)."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return []
    out: list[str] = []
    for raw in text.splitlines():
        s = raw.strip()
        if not s:
            continue
        if s.startswith("//") or s.startswith("#"):
            continue
        out.append(s)
    return out


def write_config(cvars: CvarRegistry, path: Path) -> int:
    """
    Write every archived cvar as `name value` (value shell-quoted) and return how many were written.

    Defaults are not stored. The file is replaced atomically.
    """

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    rows = list(cvars.archived())
    lines = ["// generated by qconsole, edits are overwritten on exit"]
    lines.extend(f"{name} {shlex.quote(value)}" for name, value in rows)
    tmp = p.with_name(f"{p.name}.{os.getpid()}.{secrets.token_hex(4)}.tmp")
    tmp.write_text("\n".join(lines) + "\n", encoding="utf-8")
    tmp.replace(p)
    logger.info("Saved %d archived cvar(s) to %s", len(rows), p)
    return len(rows)


def load_config(cvars: CvarRegistry, path: Path) -> list[str]:
    """
    Apply a settings file to already-registered cvars.

    Returns the names found in the file that are not registered (they are
    logged and skipped). A missing file is treated as empty.
    """

    p = Path(path)
    if not p.exists():
        return []
    unknown: list[str] = []
    for line in read_exec_lines(p):
        try:
            argv = shlex.split(line, posix=True)
        except ValueError:
            logger.warning("Skipping malformed line in %s: %r", p, line)
            continue
        if not argv:
            continue
        name = argv[0]
        value = argv[1] if len(argv) >= 2 else ""
        if not cvars.has(name):
            logger.warning("Unknown cvar %r in %s", name, p)
            unknown.append(name)
            continue
        cvars.set_value(name, value)
    return unknown
