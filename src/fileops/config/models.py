from dataclasses import dataclass

@dataclass
class AppConfig:
    show_errors: bool = False  # same effect as passing --show-errors
    log_level: str = "INFO"
    dry_run: bool = False  # mock backend
