from __future__ import annotations

import platform

from .ops_base import ERROR_NOT_SUPPORTED, FileOpsBackend, ShellCall, ShellStatus


class UnsupportedPlatformBackend(FileOpsBackend):
    """Stand-in on hosts without the Windows shell; every call fails."""

    name = "unsupported"

    def perform(self, call: ShellCall) -> ShellStatus:
        return ShellStatus(code=ERROR_NOT_SUPPORTED)

    def system_message(self, code: int) -> str:
        if code == ERROR_NOT_SUPPORTED:
            return f"Shell file operations are not available on {platform.system() or 'this platform'}."
        return ""
