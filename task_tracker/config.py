from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()

_TRUTHY = {"1", "true", "yes", "on"}


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    tasks_file: Path = Path("tasks.json")
    activity_log_file: Path = Path("activity_log.txt")
    log_level: str = "INFO"
    log_dir: str = "logs"
    pause_after_action: bool = True


def _env_path(name: str, default: str) -> Path:
    return Path(os.getenv(name, "").strip() or default)


def load_settings() -> Settings:
    load_env()
    return Settings(
        tasks_file=_env_path("TASKS_FILE", "tasks.json"),
        activity_log_file=_env_path("ACTIVITY_LOG_FILE", "activity_log.txt"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=os.getenv("LOG_DIR", "logs"),
        pause_after_action=os.getenv("PAUSE_AFTER_ACTION", "true").strip().lower() in _TRUTHY,
    )


SETTINGS = load_settings()
