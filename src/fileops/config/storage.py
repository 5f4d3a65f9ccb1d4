from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from fileops.config.models import AppConfig
from fileops.core.logging import get_logger
from fileops.core.paths import app_data_dir

_log = get_logger("fileops.config")


def _config_path() -> Path:
    return app_data_dir() / "config.json"


def load_config() -> Dict[str, Any]:
    try:
        p = _config_path()
        if not p.exists():
            return {}
    except OSError:
        # unusable home directory; run with defaults
        _log.warning("config directory unavailable, using defaults", exc_info=True)
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except Exception:
        # corrupted config; keep a backup and start fresh
        _log.warning("config unreadable, moving aside: %s", p)
        try:
            p.rename(p.with_suffix(".json.bak"))
        except Exception:
            pass
        return {}
    return data if isinstance(data, dict) else {}


def _get_bool(cfg: Dict[str, Any], key: str, default: bool) -> bool:
    v = cfg.get(key, default)
    return v if isinstance(v, bool) else default


def load_app_config() -> AppConfig:
    """Build an AppConfig from config.json; bad values fall back to defaults."""
    cfg = load_config()
    defaults = AppConfig()
    level = cfg.get("log_level", defaults.log_level)
    return AppConfig(
        show_errors=_get_bool(cfg, "show_errors", defaults.show_errors),
        log_level=level if isinstance(level, str) and level.strip() else defaults.log_level,
        dry_run=_get_bool(cfg, "dry_run", defaults.dry_run),
    )
