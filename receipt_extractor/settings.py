"""Application settings management for the receipt extraction service."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MAX_LINES = 500
DEFAULT_MAX_LINE_LENGTH = 2000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    max_lines: int = DEFAULT_MAX_LINES
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    api_token: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def _positive_int_env(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {name} must be an integer") from exc
        if value <= 0:
            raise RuntimeError(f"Environment variable {name} must be positive")
        return value

    @classmethod
    def load(cls) -> "Settings":
        _ensure_env_file_loaded()
        max_lines = cls._positive_int_env("RECEIPT_MAX_LINES", DEFAULT_MAX_LINES)
        max_line_length = cls._positive_int_env("RECEIPT_MAX_LINE_LENGTH", DEFAULT_MAX_LINE_LENGTH)

        log_level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise RuntimeError(f"LOG_LEVEL {log_level!r} is not a logging level")

        api_token = os.getenv("API_TOKEN")

        return cls(
            max_lines=max_lines,
            max_line_length=max_line_length,
            api_token=api_token.strip() if api_token and api_token.strip() else None,
            log_level=log_level,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.load()


def reset_settings_state() -> None:
    """Reset cached settings and environment file state (for tests)."""
    global _ENV_FILE_LOADED
    _ENV_FILE_LOADED = False
    get_settings.cache_clear()


_ENV_FILE_LOADED = False


def _ensure_env_file_loaded() -> None:
    global _ENV_FILE_LOADED
    if _ENV_FILE_LOADED:
        return
    candidates = [Path.cwd() / ".env", Path(__file__).resolve().parent.parent / ".env"]
    loaded = False
    for env_path in candidates:
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            loaded = True
    if not loaded:
        load_dotenv(override=False)
    _ENV_FILE_LOADED = True


__all__ = ["Settings", "get_settings", "reset_settings_state"]
