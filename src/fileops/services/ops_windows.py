from __future__ import annotations

"""SHFileOperationW through ctypes.

Going through the shell (rather than shutil) gives the same recycle bin,
conflict prompts and undo entries as Explorer.
"""

import ctypes
import platform

from fileops.core.logging import get_logger
from .ops_base import FileOpsBackend, ShellCall, ShellStatus

_log = get_logger("fileops.backend")


class SHFILEOPSTRUCTW(ctypes.Structure):
    # Plain ctypes types so the layout can be built (and tested) off Windows.
    # shellapi.h packs this struct to 1 byte on Win32 and 8 bytes on Win64.
    _pack_ = 8 if ctypes.sizeof(ctypes.c_void_p) == 8 else 1
    _fields_ = [
        ("hwnd", ctypes.c_void_p),
        ("wFunc", ctypes.c_uint),
        ("pFrom", ctypes.c_wchar_p),
        ("pTo", ctypes.c_wchar_p),
        ("fFlags", ctypes.c_ushort),
        ("fAnyOperationsAborted", ctypes.c_int),
        ("hNameMappings", ctypes.c_void_p),
        ("lpszProgressTitle", ctypes.c_wchar_p),
    ]


def build_struct(call: ShellCall) -> SHFILEOPSTRUCTW:
    op = SHFILEOPSTRUCTW()
    op.hwnd = None
    op.wFunc = call.verb
    op.pFrom = call.source_buffer
    op.pTo = call.dest_buffer
    op.fFlags = call.flags
    op.fAnyOperationsAborted = 0
    op.hNameMappings = None
    op.lpszProgressTitle = None
    return op


def is_windows() -> bool:
    return platform.system().lower() == "windows"


class WindowsShellBackend(FileOpsBackend):
    name = "windows-shell"

    def perform(self, call: ShellCall) -> ShellStatus:
        shell32 = ctypes.windll.shell32
        op = build_struct(call)
        _log.debug("SHFileOperationW verb=%d flags=0x%x", call.verb, call.flags)
        # The encoded buffers live in `call` until this returns.
        status = shell32.SHFileOperationW(ctypes.byref(op))
        return ShellStatus(code=int(status), aborted=bool(op.fAnyOperationsAborted))

    def system_message(self, code: int) -> str:
        msg = ctypes.FormatError(code).strip()
        # FormatError's placeholder when the system table has no entry
        if msg == "<no description>":
            return ""
        return msg
