from __future__ import annotations

from pathlib import Path


def app_data_dir() -> Path:
    """Per-user data directory used for the log file and config."""
    base = Path.home() / ".fileops"
    base.mkdir(parents=True, exist_ok=True)
    return base
