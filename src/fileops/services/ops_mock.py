from __future__ import annotations

from typing import List, Optional

from fileops.core.logging import get_logger
from .ops_base import FileOpsBackend, ShellCall, ShellStatus

_log = get_logger("fileops.backend")


class MockFileOpsBackend(FileOpsBackend):
    """Dry-run backend: records calls instead of touching the disk."""

    name = "mock"

    def __init__(self, status: int = 0, aborted: bool = False, messages: Optional[dict] = None):
        self.status = status
        self.aborted = aborted
        self.messages = dict(messages or {})
        self.calls: List[ShellCall] = []

    def perform(self, call: ShellCall) -> ShellStatus:
        self.calls.append(call)
        _log.info("dry run: verb=%d flags=0x%x -> status=%d", call.verb, call.flags, self.status)
        return ShellStatus(code=self.status, aborted=self.aborted)

    def system_message(self, code: int) -> str:
        return self.messages.get(code, "")
