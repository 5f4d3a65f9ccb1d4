import sys
from dataclasses import replace
from typing import List, Optional

from fileops.config.models import AppConfig
from fileops.config.storage import load_app_config
from fileops.core.debug_support import log_startup_snapshot
from fileops.core.logging import get_logger
from fileops.core.logging_setup import install_excepthook, level_from_name, setup_logging
from fileops.services.executor import OperationExecutor
from fileops.services.ops_base import FileOpsBackend
from fileops.services.ops_mock import MockFileOpsBackend
from fileops.services.ops_unsupported import UnsupportedPlatformBackend
from fileops.services.ops_windows import WindowsShellBackend, is_windows
from fileops.services.request_builder import USAGE, UsageError, build_request
from fileops.ui.dialogs import DialogPresenter, select_dialog

_log = get_logger("fileops.cli")


def select_backend(cfg: AppConfig) -> FileOpsBackend:
    if cfg.dry_run:
        return MockFileOpsBackend()
    if is_windows():
        return WindowsShellBackend()
    return UnsupportedPlatformBackend()


def main(
    argv: Optional[List[str]] = None,
    *,
    backend: Optional[FileOpsBackend] = None,
    dialog: Optional[DialogPresenter] = None,
) -> int:
    """CLI entry point. Returns the process exit status."""
    tokens = sys.argv[1:] if argv is None else list(argv)

    cfg = load_app_config()
    setup_logging(level=level_from_name(cfg.log_level))
    install_excepthook()

    try:
        request = build_request(tokens)
    except UsageError as e:
        _log.info("rejected arguments %r: %s", tokens, e)
        print(str(e))
        print(USAGE)
        return 1

    if cfg.show_errors and not request.show_error_dialog:
        request = replace(request, show_error_dialog=True)

    backend = backend or select_backend(cfg)
    log_startup_snapshot(backend.name)

    executor = OperationExecutor(backend, dialog or select_dialog())
    result = executor.run(request)
    return result.status
