from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    # Run startup/shutdown once and exit (for quick verification).
    smoke: bool = False
    # Settings file to load on startup and write on shutdown.
    # If None, falls back to $QCONSOLE_CONFIG_DIR/vars.rc (or ~/.qconsole/vars.rc).
    config_path: str | None = None
    # Script files queued into the command buffer after the settings file is applied.
    exec_scripts: tuple[str, ...] = ()
    # Drive the console from a Panda3D window instead of stdin.
    window: bool = False
    # Keep at most this many history lines. None keeps everything.
    history_max: int | None = None
    # Skip writing the settings file on shutdown.
    no_save: bool = False
