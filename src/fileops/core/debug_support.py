from __future__ import annotations

import platform
import sys

from fileops.core.logging import get_logger


def log_startup_snapshot(backend_name: str = "") -> None:
    """Log a one-shot environment snapshot useful for field debugging."""

    log = get_logger("fileops.startup")
    try:
        from fileops import __version__
    except Exception:
        __version__ = "unknown"

    log.debug("=== fileops startup ===")
    log.debug("app_version=%s", __version__)
    log.debug("python=%s", sys.version.split()[0])
    log.debug("os=%s %s", platform.system(), platform.release())
    log.debug("os_version=%s", platform.version())
    log.debug("arch=%s", platform.machine())
    if backend_name:
        log.debug("backend=%s", backend_name)

    try:
        import PySide6

        pyside_v = getattr(PySide6, "__version__", "")
    except Exception:
        pyside_v = ""
    if pyside_v:
        log.debug("pyside6=%s", pyside_v)
