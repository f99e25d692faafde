"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from purchase_analyzer.core.exceptions import ConfigurationError


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Show raw derived metrics")
    show_tax_breakdown: bool = Field(default=True, description="Show transfer tax bracket table")

    model_config = {
        "env_prefix": "PURCHASE_ANALYZER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    try:
        return AppSettings()
    except ValidationError as exc:
        err = exc.errors()[0]
        field = ".".join(str(part) for part in err["loc"])
        raise ConfigurationError(f"Invalid setting '{field}': {err['msg']}") from exc
