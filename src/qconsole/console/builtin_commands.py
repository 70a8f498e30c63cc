from __future__ import annotations

import logging
from pathlib import Path

from qconsole.config import config_path as default_config_path
from qconsole.config import read_exec_lines, write_config
from qconsole.console.core import Console
from qconsole.console.cvars import parse_bool

logger = logging.getLogger(__name__)


def exec_script(con: Console, path: Path) -> bool:
    """Queue a script file into the command buffer. Relative paths resolve from the cwd."""
    p = Path(path)
    if not p.is_absolute():
        p = Path.cwd() / p
    if not p.is_file():
        con.println(f"couldn't exec {p}")
        return False
    lines = read_exec_lines(p)
    con.println(f"exec {p} ({len(lines)} line(s))")
    con.stuff_text("\n".join(lines))
    return True


def register_builtin_commands(con: Console, *, config_path: Path | None = None) -> None:
    """Register the standard console commands on `con.cmds`."""

    cvars = con.cvars

    def _cmd_help(_argv: list[str]) -> None:
        con.println("commands:")
        for name, help_s in con.cmds.list_commands():
            con.println(f"  {name} - {help_s}".rstrip(" -"))
        con.println(f"{len(cvars)} cvar(s); use cvarlist to show them.")

    def _cmd_echo(argv: list[str]) -> None:
        con.println(" ".join(argv))

    def _cmd_set(argv: list[str]) -> None:
        if len(argv) < 2:
            con.println("usage: set <cvar> <value>")
            return
        name = argv[0]
        if not cvars.has(name):
            con.println(f"unknown variable: {name}")
            return
        cvars.set_value(name, " ".join(argv[1:]))

    def _cmd_toggle(argv: list[str]) -> None:
        if not argv:
            con.println("usage: toggle <cvar>")
            return
        name = argv[0]
        if not cvars.has(name):
            con.println(f"unknown variable: {name}")
            return
        try:
            cur = parse_bool(cvars.get(name))
        except ValueError:
            con.println(f'error: {name} is not a boolean ("{cvars.get(name)}")')
            return
        cvars.set_value(name, "0" if cur else "1")
        con.println(f'{name} "{cvars.get(name)}"')

    def _cmd_reset(argv: list[str]) -> None:
        if not argv:
            con.println("usage: reset <cvar>")
            return
        name = argv[0]
        if not cvars.has(name):
            con.println(f"unknown variable: {name}")
            return
        cvars.reset(name)
        con.println(f'{name} "{cvars.get(name)}"')

    def _cmd_cvarlist(argv: list[str]) -> None:
        prefix = argv[0] if argv else ""
        n = 0
        for name, value, archive, info in cvars.list():
            if not name.startswith(prefix):
                continue
            flags = ("a" if archive else " ") + ("i" if info else " ")
            con.println(f'{flags} {name} "{value}"')
            n += 1
        con.println(f"{n} cvar(s)")

    def _cmd_cmdlist(_argv: list[str]) -> None:
        rows = con.cmds.list_commands()
        for name, _help in rows:
            con.println(f"  {name}")
        con.println(f"{len(rows)} command(s)")

    def _cmd_clear(_argv: list[str]) -> None:
        con.output.clear()

    def _cmd_exec(argv: list[str]) -> None:
        if not argv:
            con.println("usage: exec <path>")
            return
        exec_script(con, Path(str(argv[0])))

    def _cmd_writeconfig(argv: list[str]) -> None:
        p = Path(str(argv[0])) if argv else (config_path or default_config_path())
        try:
            n = write_config(cvars, p)
        except OSError as e:
            logger.error("Failed to write %s: %s", p, e)
            con.println(f"error: couldn't write {p}: {e}")
            return
        con.println(f"wrote {n} cvar(s) to {p}")

    con.cmds.register("help", _cmd_help, help="List commands.")
    con.cmds.register("echo", _cmd_echo, help="Print text.")
    con.cmds.register("set", _cmd_set, help="Set a cvar: set <cvar> <value>.")
    con.cmds.register("toggle", _cmd_toggle, help="Flip a boolean cvar between 0 and 1.")
    con.cmds.register("reset", _cmd_reset, help="Restore a cvar to its default value.")
    con.cmds.register("cvarlist", _cmd_cvarlist, help="List cvars, optionally by prefix.")
    con.cmds.register("cmdlist", _cmd_cmdlist, help="List command names.")
    con.cmds.register("clear", _cmd_clear, help="Clear the console output.")
    con.cmds.register("exec", _cmd_exec, help="Run a script file on the next frame.")
    con.cmds.register("writeconfig", _cmd_writeconfig, help="Save archived cvars to the settings file.")
