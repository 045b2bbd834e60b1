"""
UCP Helper Centralized Configuration

Provides validated, type-safe access to all environment variables using Pydantic Settings.

Usage:
    from ucp_helper.core.config import get_settings

    settings = get_settings()
    if settings.log_level == "DEBUG":
        ...

Environment Variables:
    UCP_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    UCP_DEBUG: Legacy debug flag (enables DEBUG level if set)
    UCP_LOG_JSON: Output logs as JSON
    UCP_TRAINER_TIER: Default trainer tier for CLI commands
    UCP_BASE_WEIGHT: Base spawn weight used by the summary table
    UCP_CONFIG_FILE: YAML/JSON scaling config to load instead of the defaults
    UCP_EXPORT_PATH: Output path for the exported spawn config
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_env_file() -> Path | None:
    """
    Find .env file by searching for project root markers.

    Searches upward from this file's location for pyproject.toml,
    then checks for .env in that directory.

    Returns:
        Path to .env if found, None otherwise
    """
    current = Path(__file__).resolve().parent

    for _ in range(10):  # Limit search depth
        if (current / "pyproject.toml").exists():
            env_file = current / ".env"
            if env_file.exists():
                return env_file
            return None  # Project root found but no .env
        parent = current.parent
        if parent == current:
            break  # Reached filesystem root
        current = parent

    return None


_ENV_FILE = _find_project_env_file()


class UcpSettings(BaseSettings):
    """
    UCP Helper configuration settings with validation.

    Environment variables are automatically loaded with the UCP_ prefix.
    Scaling coefficients are NOT settings: they travel explicitly as a
    ScalingConfig value and are loaded from ``config_file`` when given.
    """

    model_config = SettingsConfigDict(
        env_prefix="UCP_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # =========================================================================
    # Logging Configuration
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for UCP Helper components",
    )

    debug: bool = Field(
        default=False,
        description="Legacy debug flag (enables DEBUG level if set)",
    )

    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format for machine parsing",
    )

    # =========================================================================
    # CLI Defaults
    # =========================================================================

    trainer_tier: int = Field(
        default=1,
        ge=1,
        description="Default trainer tier when a command does not pass one",
    )

    base_weight: float = Field(
        default=300.0,
        description="Base spawn weight multiplied by each tier's weight multiplier",
    )

    config_file: Optional[Path] = Field(
        default=None,
        description="YAML or JSON scaling config file (defaults used when unset)",
    )

    export_path: Path = Field(
        default=Path("ucp-spawn.json"),
        description="Output path for the exported spawn config document",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def effective_log_level(self) -> str:
        """
        Get effective log level, respecting legacy UCP_DEBUG.

        Priority:
        1. Explicit UCP_LOG_LEVEL
        2. UCP_DEBUG=1 -> DEBUG
        3. Default: WARNING
        """
        if self.debug and self.log_level == "WARNING":
            return "DEBUG"
        return self.log_level

    @property
    def log_level_int(self) -> int:
        """Get effective log level as logging constant."""
        return getattr(logging, self.effective_log_level)


# =============================================================================
# Singleton Accessor
# =============================================================================


@lru_cache(maxsize=1)
def get_settings() -> UcpSettings:
    """
    Get the singleton settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        UcpSettings instance with validated configuration
    """
    return UcpSettings()


def reset_settings() -> None:
    """
    Reset the settings cache (for testing).

    After calling this, the next get_settings() call will
    reload settings from environment variables.
    """
    get_settings.cache_clear()


# =============================================================================
# Convenience Functions
# =============================================================================


def is_debug_enabled() -> bool:
    """Check if debug logging is enabled."""
    return get_settings().effective_log_level == "DEBUG"


def is_json_logging() -> bool:
    """Check if JSON logging is enabled."""
    return get_settings().log_json
