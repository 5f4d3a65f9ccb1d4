from __future__ import annotations

"""Central logging utilities.

Everything logs to a single rotating file. Stdout is reserved for the one
result line that scripting callers parse, so nothing here writes to it.
"""

import logging
from pathlib import Path

from fileops.core.paths import app_data_dir


def log_path() -> Path:
    return app_data_dir() / "fileops.log"


def get_logger(name: str = "fileops") -> logging.Logger:
    return logging.getLogger(name)
