from __future__ import annotations

import argparse
import logging
import sys

from qconsole.app_config import RunConfig
from qconsole.host import ConsoleHost


def _run_terminal(host: ConsoleHost) -> None:
    for raw in sys.stdin:
        host.submit(raw.rstrip("\r\n"))
        host.frame()
        if not host.running:
            break


def _run_window(host: ConsoleHost) -> None:
    from direct.showbase.ShowBase import ShowBase
    from direct.task import Task

    from qconsole.input_binding import ConsoleInputBinding

    base = ShowBase()
    binding = ConsoleInputBinding(host.console)
    binding.install(base)

    def _frame_task(task):
        host.frame()
        if not host.running:
            base.userExit()
        return Task.cont

    base.taskMgr.add(_frame_task, "qconsole-frame")
    try:
        base.run()
    finally:
        binding.disable()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="qconsole", description="Game console and cvar host")
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Settings file to load on startup and save on exit (default: ~/.qconsole/vars.rc).",
    )
    parser.add_argument(
        "--exec",
        dest="exec_scripts",
        action="append",
        default=[],
        help="Script file to run after the settings file is applied. May be repeated.",
    )
    parser.add_argument(
        "--history-max",
        type=int,
        default=None,
        help="Keep at most this many history lines (default: unbounded).",
    )
    parser.add_argument(
        "--smoke",
        action="store_true",
        help="Start up, run one frame and exit (for quick verification).",
    )
    parser.add_argument(
        "--window",
        action="store_true",
        help="Open a Panda3D window and take console input from it instead of stdin.",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write the settings file on exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = RunConfig(
        smoke=bool(args.smoke),
        config_path=args.config_path,
        exec_scripts=tuple(args.exec_scripts),
        window=bool(args.window),
        history_max=args.history_max,
        no_save=bool(args.no_save),
    )
    host = ConsoleHost(cfg, sink=print)
    host.startup()
    try:
        host.frame()
        if cfg.smoke:
            return
        if cfg.window:
            _run_window(host)
        else:
            _run_terminal(host)
    finally:
        host.shutdown()


if __name__ == "__main__":
    main()
