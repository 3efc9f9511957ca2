"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. TANFLOW_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. TANFLOW_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("TANFLOW_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bank connection (FINTS_ prefix)
    fints_server_url: str = ""
    fints_blz: str = ""
    fints_username: str = ""
    fints_pin: SecretStr | None = None
    fints_product_id: str = ""
    fints_product_version: str = "1.0"
    fints_tan_mechanism: str | None = None
    fints_tan_medium: str | None = None

    # Session persistence
    session_file: Path = Path("~/.tanflow/session")
    session_encryption_key: SecretStr | None = None  # Fernet key, optional

    # Decoupled authentication
    confirmation_token: str = "done"

    # Logging (LOG_ prefix)
    log_level: str = "WARNING"

    @field_validator("fints_tan_mechanism", "fints_tan_medium", mode="before")
    @classmethod
    def _empty_as_none(cls, v: object) -> object:
        """Treat empty strings from .env files as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("confirmation_token")
    @classmethod
    def _validate_confirmation_token(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "confirmation_token must not be empty"
            raise ValueError(msg)
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
