from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

# SHFileOperation verbs
FO_MOVE = 0x1
FO_COPY = 0x2
FO_DELETE = 0x3

# SHFileOperation flags
FOF_MULTIDESTFILES = 0x1
FOF_ALLOWUNDO = 0x40
FOF_NOCONFIRMMKDIR = 0x200
FOF_WANTNUKEWARNING = 0x4000

ERROR_NOT_SUPPORTED = 50
ERROR_CANCELLED = 1223


@dataclass(frozen=True)
class ShellCall:
    """Arguments for one SHFileOperation call, already encoded."""

    verb: int
    source_buffer: str
    dest_buffer: Optional[str]
    flags: int


@dataclass(frozen=True)
class ShellStatus:
    code: int
    aborted: bool = False


class FileOpsBackend(ABC):
    name = "base"

    @abstractmethod
    def perform(self, call: ShellCall) -> ShellStatus:
        """Run the operation synchronously. May block and show native UI."""
        raise NotImplementedError

    def system_message(self, code: int) -> str:
        """Generic OS text for `code`; "" when the OS has none."""
        return ""
