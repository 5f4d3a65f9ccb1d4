from __future__ import annotations

"""Python helpers that run the CLI in a hidden child process.

Each helper validates its input with the CLI's own rules (raising UsageError
before anything is launched) and returns the child's exit code: 0 on
success, 1223 when the user cancelled, otherwise the shell's error code.
"""

import subprocess
import sys
from typing import List, Sequence, Union

from fileops.core.logging import get_logger
from fileops.services.request_builder import (
    FLAG_FROM,
    FLAG_SHOW_ERRORS,
    FLAG_TO,
    Action,
    validate,
)

PathArg = Union[str, Sequence[str], None]

_log = get_logger("fileops.api")


def _as_list(paths: PathArg) -> List[str]:
    if paths is None:
        return []
    if isinstance(paths, str):
        paths = paths.strip()
        return [paths] if paths else []
    return list(paths)


def build_command(
    action: Action,
    sources: Sequence[str],
    destinations: Sequence[str] = (),
    show_dialog_on_error: bool = True,
) -> List[str]:
    cmd = [sys.executable, "-m", "fileops", action.value]
    if show_dialog_on_error:
        cmd.append(FLAG_SHOW_ERRORS)
    cmd.append(FLAG_FROM)
    cmd.extend(sources)
    if destinations:
        cmd.append(FLAG_TO)
        cmd.extend(destinations)
    return cmd


def _run(action: Action, src: PathArg, dest: PathArg, show_dialog_on_error: bool) -> int:
    sources = _as_list(src)
    destinations = _as_list(dest)
    validate(action.value, sources, destinations)

    cmd = build_command(action, sources, destinations, show_dialog_on_error)
    _log.info("launching %s for %d path(s)", action.value, len(sources))
    proc = subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
    )
    out = (proc.stdout or "").strip()
    if out:
        _log.info("%s -> %s (exit %d)", action.value, out.splitlines()[-1], proc.returncode)
    return proc.returncode


def copy(src: PathArg, dest: PathArg, *, show_dialog_on_error: bool = True) -> int:
    """Copy the source path(s) to the destination path(s). Paths should be absolute."""
    return _run(Action.COPY, src, dest, show_dialog_on_error)


def move(src: PathArg, dest: PathArg, *, show_dialog_on_error: bool = True) -> int:
    """Move the source path(s) to the destination path(s). Paths should be absolute."""
    return _run(Action.MOVE, src, dest, show_dialog_on_error)


def delete(src: PathArg, *, show_dialog_on_error: bool = True) -> int:
    """Delete the source path(s), to the recycle bin where possible."""
    return _run(Action.DELETE, src, None, show_dialog_on_error)


__all__ = ["copy", "move", "delete", "build_command"]
