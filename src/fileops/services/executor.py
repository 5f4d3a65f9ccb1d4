from __future__ import annotations

"""Run an OperationRequest through a backend and report the outcome."""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Union

from fileops.core.logging import get_logger
from fileops.ui.dialogs import DialogPresenter, NullDialog
from .error_catalog import resolve_message
from .ops_base import (
    ERROR_CANCELLED,
    FO_COPY,
    FO_DELETE,
    FO_MOVE,
    FOF_ALLOWUNDO,
    FOF_MULTIDESTFILES,
    FOF_NOCONFIRMMKDIR,
    FOF_WANTNUKEWARNING,
    FileOpsBackend,
    ShellCall,
)
from .path_encoding import encode_path_list
from .request_builder import Action, OperationRequest

_log = get_logger("fileops.executor")

_VERBS = {
    Action.COPY: FO_COPY,
    Action.MOVE: FO_MOVE,
    Action.DELETE: FO_DELETE,
}

BASE_FLAGS = FOF_ALLOWUNDO | FOF_NOCONFIRMMKDIR | FOF_WANTNUKEWARNING


@dataclass(frozen=True)
class Success:
    status: int = 0

    def summary(self) -> str:
        return "ok"


@dataclass(frozen=True)
class Cancelled:
    status: int = ERROR_CANCELLED

    def summary(self) -> str:
        return "cancelled"


@dataclass(frozen=True)
class Failed:
    code: int
    message: str = ""

    @property
    def status(self) -> int:
        return self.code

    @property
    def hex_code(self) -> str:
        return format_hex(self.code)

    def summary(self) -> str:
        return f"error {self.hex_code}: {self.message}"


OperationResult = Union[Success, Cancelled, Failed]


def format_hex(code: int) -> str:
    # Negative HRESULT-style values are shown as their unsigned 32-bit form.
    if code < 0:
        code &= 0xFFFFFFFF
    return f"0x{code:x}"


def build_call(request: OperationRequest) -> ShellCall:
    flags = BASE_FLAGS
    if request.multi_destination:
        flags |= FOF_MULTIDESTFILES
    return ShellCall(
        verb=_VERBS[request.action],
        source_buffer=encode_path_list(request.sources),
        dest_buffer=encode_path_list(request.destinations) if request.destinations else None,
        flags=flags,
    )


def classify_status(code: int, aborted: bool = False, backend: Optional[FileOpsBackend] = None) -> OperationResult:
    if aborted or code == ERROR_CANCELLED:
        return Cancelled(status=code)
    if code == 0:
        return Success()
    lookup = backend.system_message if backend is not None else None
    return Failed(code=code, message=resolve_message(code, lookup))


def dialog_title(action: Action, code: int) -> str:
    return f"Unable to {action.value} files (ERR {format_hex(code)})"


class OperationExecutor:
    def __init__(
        self,
        backend: FileOpsBackend,
        dialog: Optional[DialogPresenter] = None,
        out: Optional[TextIO] = None,
    ):
        self.backend = backend
        self.dialog = dialog or NullDialog()
        self._out = out

    def run(self, request: OperationRequest) -> OperationResult:
        call = build_call(request)
        _log.info(
            "%s: %d source(s), %d destination(s), backend=%s",
            request.action.value,
            len(request.sources),
            len(request.destinations),
            self.backend.name,
        )
        status = self.backend.perform(call)
        result = classify_status(status.code, status.aborted, self.backend)

        if isinstance(result, Failed):
            _log.warning("%s failed: %s", request.action.value, result.summary())
        else:
            _log.info("%s: %s", request.action.value, result.summary())

        # The result line goes out before any dialog so callers always get it.
        out = self._out or sys.stdout
        print(result.summary(), file=out, flush=True)

        if isinstance(result, Failed) and request.show_error_dialog:
            self._show_dialog(request.action, result)
        return result

    def _show_dialog(self, action: Action, result: Failed) -> None:
        try:
            self.dialog.warning(dialog_title(action, result.code), result.message)
        except Exception:
            _log.exception("error dialog failed")
