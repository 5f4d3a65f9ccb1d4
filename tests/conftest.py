from pathlib import Path
from typing import List, Tuple

import pytest

from fileops.ui.dialogs import DialogPresenter


class RecordingDialog(DialogPresenter):
    def __init__(self):
        self.shown: List[Tuple[str, str]] = []

    def warning(self, title: str, text: str) -> None:
        self.shown.append((title, text))


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home
