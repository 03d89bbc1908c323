"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. FINTRACK_ENV_FILE environment variable (path to a .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    env_file_path = os.environ.get("FINTRACK_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in (".env.dev", ".env"):
        candidate = config_dir / name
        if candidate.exists():
            return candidate

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Every field can be overridden with ``FINTRACK_<FIELD_NAME>``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "FinTrack"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/fintrack.db"

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Simulated bank source
    bank_auth_latency_seconds: float = 2.0
    bank_fetch_latency_seconds: float = 3.0
    bank_failure_probability: float = 0.0
    bank_random_seed: Optional[int] = None

    # Import workflow timeouts
    bank_auth_timeout_seconds: float = 10.0
    bank_import_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"

    @field_validator("bank_failure_probability")
    @classmethod
    def _validate_probability(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            msg = "bank_failure_probability must be between 0 and 1"
            raise ValueError(msg)
        return v

    @field_validator("bank_auth_latency_seconds", "bank_fetch_latency_seconds")
    @classmethod
    def _validate_latency(cls, v: float) -> float:
        if v < 0:
            msg = "Latency must be non-negative"
            raise ValueError(msg)
        return v

    @field_validator("bank_auth_timeout_seconds", "bank_import_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            msg = "Timeouts must be positive"
            raise ValueError(msg)
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
