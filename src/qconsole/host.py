from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from qconsole.app_config import RunConfig
from qconsole.config import config_path, load_config, write_config
from qconsole.console.builtin_commands import exec_script, register_builtin_commands
from qconsole.console.commands import CommandRegistry
from qconsole.console.core import CHAR_SUBMIT, Console
from qconsole.console.cvars import CvarRegistry
from qconsole.console.output import ConsoleOutput, OutputSink

logger = logging.getLogger(__name__)

UserinfoListener = Callable[[str], None]

# (name, default, archive, info)
CLIENT_CVARS: tuple[tuple[str, str, bool, bool], ...] = (
    ("_cl_name", "player", True, True),
    ("_cl_color", "0", True, True),
    ("rate", "2500", False, True),
    ("fov", "90", False, False),
    ("sensitivity", "3", True, False),
    ("m_pitch", "0.022", True, False),
    ("m_yaw", "0.022", True, False),
    ("lookspring", "0", True, False),
    ("cl_forwardspeed", "200", True, False),
    ("cl_backspeed", "200", True, False),
    ("cl_sidespeed", "350", False, False),
    ("cl_upspeed", "200", False, False),
    ("volume", "0.7", True, False),
)


def register_client_cvars(cvars: CvarRegistry) -> None:
    for name, default, archive, info in CLIENT_CVARS:
        if archive and info:
            cvars.register_archive_updateinfo(name, default)
        elif archive:
            cvars.register_archive(name, default)
        elif info:
            cvars.register_updateinfo(name, default)
        else:
            cvars.register(name, default)


class ConsoleHost:
    """
    Top-level application context for the console subsystem.

    Owns the registries and the single Console for the lifetime of the program:
    `startup()` once, `frame()` per host frame, `shutdown()` once. Other
    subsystems get narrow access (the userinfo listener, `console.send_*`)
    instead of shared references.
    """

    def __init__(
        self,
        cfg: RunConfig | None = None,
        *,
        sink: OutputSink | None = None,
        on_userinfo: UserinfoListener | None = None,
    ) -> None:
        self.cfg = cfg or RunConfig()
        self.cvars = CvarRegistry()
        self.cmds = CommandRegistry()
        self.console = Console(
            cmds=self.cmds,
            cvars=self.cvars,
            output=ConsoleOutput(sink=sink),
            history_max=self.cfg.history_max,
        )
        self.running: bool = False
        self._on_userinfo = on_userinfo
        self._userinfo: str = ""
        self._started = False

    @property
    def userinfo(self) -> str:
        return self._userinfo

    def settings_path(self) -> Path:
        if self.cfg.config_path:
            return Path(self.cfg.config_path)
        return config_path()

    def startup(self) -> None:
        if self._started:
            return
        self._started = True

        register_client_cvars(self.cvars)
        register_builtin_commands(self.console, config_path=self.settings_path())
        self.cmds.register("quit", self._cmd_quit, help="Exit the program.")

        path = self.settings_path()
        for name in load_config(self.cvars, path):
            self.console.println(f"unknown variable in {path.name}: {name}")
        for script in self.cfg.exec_scripts:
            exec_script(self.console, Path(script))

        # Settings-file values are part of the initial userinfo, not a change.
        self.cvars.drain_info_changes()
        self._rebuild_userinfo()
        self.running = True
        logger.info("Console host started (%d cvar(s), %d command(s))", len(self.cvars), len(self.cmds))

    def frame(self) -> int:
        """Run queued console lines and publish userinfo changes. Returns the number of lines run."""
        ran = self.console.execute()
        changed = self.cvars.drain_info_changes()
        if changed:
            logger.debug("info cvars changed: %s", ", ".join(changed))
            self._rebuild_userinfo()
        return ran

    def submit(self, line: str) -> None:
        """Type `line` into the console and press enter, one character at a time."""
        for ch in str(line):
            if ch in ("\r", "\n"):
                continue
            self.console.send_char(ch)
        self.console.send_char(CHAR_SUBMIT)

    def shutdown(self) -> None:
        if not self._started:
            return
        self.running = False
        if self.cfg.no_save:
            logger.info("Console host stopped (settings not saved)")
            return
        path = self.settings_path()
        try:
            write_config(self.cvars, path)
        except OSError as e:
            logger.error("Failed to save settings to %s: %s", path, e)
        logger.info("Console host stopped")

    def _rebuild_userinfo(self) -> None:
        self._userinfo = self.cvars.info_string()
        if self._on_userinfo is not None:
            self._on_userinfo(self._userinfo)

    def _cmd_quit(self, _argv: list[str]) -> None:
        self.running = False
