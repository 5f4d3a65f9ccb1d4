from __future__ import annotations

import os
import platform
from abc import ABC, abstractmethod

from fileops.core.logging import get_logger

_log = get_logger("fileops.dialogs")


class DialogPresenter(ABC):
    """Modal warning capability used for --show-errors."""

    @abstractmethod
    def warning(self, title: str, text: str) -> None:
        raise NotImplementedError


class NullDialog(DialogPresenter):
    def warning(self, title: str, text: str) -> None:
        return None


def display_available() -> bool:
    """Whether Qt can open a window here.

    Without a display Qt aborts the whole process while creating the
    QApplication, which no exception handler can catch.
    """
    if platform.system().lower() in ("windows", "darwin"):
        return True
    return bool(
        os.environ.get("DISPLAY")
        or os.environ.get("WAYLAND_DISPLAY")
        or os.environ.get("QT_QPA_PLATFORM")
    )


class QtWarningDialog(DialogPresenter):
    """QMessageBox warning; creates a throwaway QApplication when needed."""

    def warning(self, title: str, text: str) -> None:
        from PySide6.QtWidgets import QApplication, QMessageBox

        app = QApplication.instance()
        if app is None:
            app = QApplication([])
        _log.debug("showing error dialog: %s", title)
        QMessageBox.warning(None, title, text)


def select_dialog() -> DialogPresenter:
    if display_available():
        return QtWarningDialog()
    _log.info("no display available, error dialogs disabled")
    return NullDialog()
