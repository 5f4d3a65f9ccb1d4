import json
from pathlib import Path

from fileops import app
from fileops.ui import dialogs
from fileops.services.ops_base import ERROR_CANCELLED, ERROR_NOT_SUPPORTED
from fileops.services.ops_mock import MockFileOpsBackend
from conftest import RecordingDialog


def test_cli_success(capsys):
    backend = MockFileOpsBackend()
    code = app.main(["copy", "--from", "a.txt", "--to", "dir/"], backend=backend, dialog=RecordingDialog())
    assert code == 0
    assert capsys.readouterr().out == "ok\n"


def test_cli_usage_error_exits_one(capsys):
    backend = MockFileOpsBackend()
    code = app.main(["copy", "--from", "a.txt", "--to", "x.txt", "y.txt"], backend=backend)
    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("error: number of destination paths cannot be more than")
    assert "usage: (action is one of: copy, move, delete)" in out
    assert backend.calls == []


def test_cli_propagates_raw_status(capsys):
    code = app.main(
        ["move", "--from", "a", "--to", "b"],
        backend=MockFileOpsBackend(status=0x76),
        dialog=RecordingDialog(),
    )
    assert code == 0x76
    assert capsys.readouterr().out == "error 0x76: The destination is a subtree of the source.\n"


def test_cli_cancelled(capsys):
    dialog = RecordingDialog()
    code = app.main(
        ["delete", "--from", "a", "--show-errors"],
        backend=MockFileOpsBackend(status=ERROR_CANCELLED),
        dialog=dialog,
    )
    assert code == ERROR_CANCELLED
    assert capsys.readouterr().out == "cancelled\n"
    assert dialog.shown == []


def test_config_show_errors_enables_dialog(isolated_home, capsys):
    cfg_dir = isolated_home / ".fileops"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text(json.dumps({"show_errors": True}), encoding="utf-8")
    dialog = RecordingDialog()
    app.main(["delete", "--from", "a"], backend=MockFileOpsBackend(status=0x78), dialog=dialog)
    assert dialog.shown == [
        ("Unable to delete files (ERR 0x78)", "Security settings denied access to the source.")
    ]


def test_config_dry_run_selects_mock(isolated_home, capsys):
    cfg_dir = isolated_home / ".fileops"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text(json.dumps({"dry_run": True}), encoding="utf-8")
    code = app.main(["copy", "--from", "a", "--to", "b"], dialog=RecordingDialog())
    assert code == 0
    assert capsys.readouterr().out == "ok\n"


def test_unsupported_platform_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(app, "is_windows", lambda: False)
    code = app.main(["copy", "--from", "a", "--to", "b"], dialog=RecordingDialog())
    assert code == ERROR_NOT_SUPPORTED
    assert capsys.readouterr().out.startswith("error 0x32: Shell file operations are not available")



def test_unusable_home_still_reports_usage(monkeypatch, tmp_path, capsys):
    not_a_dir = tmp_path / "notadir"
    not_a_dir.write_text("", encoding="utf-8")
    monkeypatch.setattr(Path, "home", lambda: not_a_dir)
    assert app.main(["copy", "--from", "a"]) == 1
    assert "error: at least one destination path is required" in capsys.readouterr().out


def test_show_errors_without_display_skips_dialog(monkeypatch, capsys):
    monkeypatch.setattr(app, "is_windows", lambda: False)
    monkeypatch.setattr(dialogs.platform, "system", lambda: "Linux")
    for var in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM"):
        monkeypatch.delenv(var, raising=False)
    code = app.main(["copy", "--from", "a", "--to", "b", "--show-errors"])
    assert code == ERROR_NOT_SUPPORTED
    assert capsys.readouterr().out.startswith("error 0x32: ")
