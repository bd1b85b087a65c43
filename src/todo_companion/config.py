# src/todo_companion/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Module-level constants are exported for quick access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODOC"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Behaviour ----
    autosave: bool
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    save_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "ekud").strip() or "ekud"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        autosave = _env_bool(_k("AUTOSAVE"), True)
        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        save_path = _env_path(_k("SAVE_PATH"), data_dir / "tasks.txt")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            autosave=autosave,
            console_enabled=console_enabled,
            data_dir=data_dir,
            save_path=save_path,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for simple switches.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    if hasattr(_config_local, "AUTOSAVE"):
        object.__setattr__(SETTINGS, "autosave", bool(_config_local.AUTOSAVE))
    if hasattr(_config_local, "CONSOLE_ENABLED"):
        object.__setattr__(SETTINGS, "console_enabled", bool(_config_local.CONSOLE_ENABLED))


def get_settings() -> Settings:
    return SETTINGS


# --------------------------------------------------------------------------------------
# Module-level constants.
# --------------------------------------------------------------------------------------

APP_NAME = SETTINGS.app_name
LOG_LEVEL = SETTINGS.log_level

AUTOSAVE = SETTINGS.autosave
CONSOLE_ENABLED = SETTINGS.console_enabled

DATA_DIR = SETTINGS.data_dir
SAVE_PATH = SETTINGS.save_path
