from __future__ import annotations

from pathlib import Path

from qconsole.console.builtin_commands import register_builtin_commands
from qconsole.console.commands import CommandRegistry
from qconsole.console.core import Console
from qconsole.console.cvars import CvarRegistry
from qconsole.console.output import ConsoleOutput


def _console(config_path: Path | None = None) -> Console:
    con = Console(cmds=CommandRegistry(), cvars=CvarRegistry(), output=ConsoleOutput())
    con.cvars.register("fov", "90")
    con.cvars.register_archive("sensitivity", "3")
    con.cvars.register("lookspring", "0")
    register_builtin_commands(con, config_path=config_path)
    return con


def test_set_updates_cvar_and_reports_unknown() -> None:
    con = _console()
    con.execute_line("set fov 110")
    assert con.cvars.get("fov") == "110"

    con.execute_line("set nosuch 1")
    assert con.output.lines()[-1] == "unknown variable: nosuch"

    con.execute_line("set fov")
    assert con.output.lines()[-1] == "usage: set <cvar> <value>"


def test_toggle_and_reset() -> None:
    con = _console()
    con.execute_line("toggle lookspring")
    assert con.cvars.get("lookspring") == "1"
    con.execute_line("toggle lookspring")
    assert con.cvars.get("lookspring") == "0"

    con.execute_line("set fov 120")
    con.execute_line("reset fov")
    assert con.cvars.get("fov") == "90"
    assert con.output.lines()[-1] == 'fov "90"'

    con.execute_line("toggle fov")
    assert con.cvars.get("fov") == "90"
    assert con.output.lines()[-1].startswith("error: fov is not a boolean")


def test_echo_and_cvarlist() -> None:
    con = _console()
    con.execute_line("echo hello   world")
    assert con.output.lines()[-1] == "hello world"

    con.output.clear()
    con.execute_line("cvarlist s")
    assert con.output.lines() == ['a  sensitivity "3"', "1 cvar(s)"]


def test_clear_empties_output() -> None:
    con = _console()
    con.execute_line("echo x")
    con.execute_line("clear")
    assert con.output.lines() == []


def test_help_lists_registered_commands() -> None:
    con = _console()
    con.execute_line("help")
    out = con.output.lines()
    assert out[0] == "commands:"
    assert any(line.startswith("  set - ") for line in out)
    assert out[-1] == "3 cvar(s); use cvarlist to show them."


def test_exec_queues_script_for_next_frame(tmp_path: Path) -> None:
    script = tmp_path / "autoexec.cfg"
    script.write_text("// comment\nset fov 100\n\n# another\nsensitivity 7\n", encoding="utf-8")
    con = _console()

    con.execute_line(f"exec {script}")
    assert con.cvars.get("fov") == "90"
    assert con.pending() == ["set fov 100", "sensitivity 7"]

    con.execute()
    assert con.cvars.get("fov") == "100"
    assert con.cvars.get("sensitivity") == "7"


def test_exec_missing_file_is_reported(tmp_path: Path) -> None:
    con = _console()
    missing = tmp_path / "nope.cfg"
    con.execute_line(f"exec {missing}")
    assert con.output.lines()[-1] == f"couldn't exec {missing}"
    assert con.pending() == []


def test_writeconfig_writes_archived_cvars(tmp_path: Path) -> None:
    target = tmp_path / "vars.rc"
    con = _console(config_path=target)
    con.execute_line("set sensitivity 5")
    con.execute_line("set fov 120")

    con.execute_line("writeconfig")

    text = target.read_text(encoding="utf-8")
    assert "sensitivity 5" in text.splitlines()
    assert "fov" not in text
    assert con.output.lines()[-1] == f"wrote 1 cvar(s) to {target}"
