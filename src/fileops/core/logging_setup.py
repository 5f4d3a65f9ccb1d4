from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from fileops.core.logging import log_path


def setup_logging(level: int = logging.INFO) -> None:
    """Configure a rotating file logger.

    - Never raises (a broken log dir must not change the exit status)
    - Single file: ~/.fileops/fileops.log
    """
    try:
        root = logging.getLogger("fileops")
        root.setLevel(level)
        # The CLI owns stdout; keep records away from the root logger's handlers.
        root.propagate = False

        # Avoid duplicating handlers when main() runs more than once in-process
        if any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            for h in root.handlers:
                h.setLevel(level)
            return

        p = log_path()
        p.parent.mkdir(parents=True, exist_ok=True)

        fmt = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        fh = RotatingFileHandler(
            p,
            maxBytes=2 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        fh.setFormatter(fmt)
        fh.setLevel(level)
        root.addHandler(fh)

        logging.captureWarnings(True)

    except Exception:
        # Logging is optional; the operation still runs without it.
        pass


def level_from_name(name: str, default: int = logging.INFO) -> int:
    value = logging.getLevelName((name or "").strip().upper())
    return value if isinstance(value, int) else default


def install_excepthook() -> None:
    """Log uncaught exceptions to the app log."""

    def _hook(exc_type, exc, tb):
        try:
            logging.getLogger("fileops").exception("Uncaught exception", exc_info=(exc_type, exc, tb))
        except Exception:
            pass
        # Keep default behavior (prints to stderr)
        try:
            sys.__excepthook__(exc_type, exc, tb)
        except Exception:
            pass

    sys.excepthook = _hook
