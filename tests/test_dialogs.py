from fileops.ui import dialogs
from fileops.ui.dialogs import NullDialog, QtWarningDialog, display_available, select_dialog


def _headless_linux(monkeypatch):
    monkeypatch.setattr(dialogs.platform, "system", lambda: "Linux")
    for var in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM"):
        monkeypatch.delenv(var, raising=False)


def test_no_display_uses_null_dialog(monkeypatch):
    _headless_linux(monkeypatch)
    assert display_available() is False
    assert isinstance(select_dialog(), NullDialog)


def test_x11_display_uses_qt(monkeypatch):
    _headless_linux(monkeypatch)
    monkeypatch.setenv("DISPLAY", ":0")
    assert isinstance(select_dialog(), QtWarningDialog)


def test_windows_always_has_display(monkeypatch):
    _headless_linux(monkeypatch)
    monkeypatch.setattr(dialogs.platform, "system", lambda: "Windows")
    assert display_available() is True
