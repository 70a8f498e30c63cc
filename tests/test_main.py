from __future__ import annotations

import io
from pathlib import Path

from qconsole.__main__ import main


def test_smoke_run_writes_settings_file(tmp_path: Path) -> None:
    cfg = tmp_path / "vars.rc"
    main(["--smoke", "--config", str(cfg)])
    assert "sensitivity 3" in cfg.read_text(encoding="utf-8").splitlines()


def test_terminal_mode_feeds_stdin_lines(monkeypatch, capsys, tmp_path: Path) -> None:
    cfg = tmp_path / "vars.rc"
    monkeypatch.setattr("sys.stdin", io.StringIO("set sensitivity 4\nsensitivity\nquit\necho never\n"))

    main(["--config", str(cfg)])

    out = capsys.readouterr().out
    assert "] set sensitivity 4" in out
    assert 'sensitivity "4"' in out
    assert "never" not in out
    assert "sensitivity 4" in cfg.read_text(encoding="utf-8").splitlines()
