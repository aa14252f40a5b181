"""Settings for tm-bridge.

Loaded from (highest precedence first):
    1. Environment variables (TM_BRIDGE_* prefix)
    2. .env file in the working directory
    3. Default values
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BridgeSettings(BaseSettings):
    """Runtime settings for the tags bridge, CLI and MCP server."""

    model_config = SettingsConfigDict(
        env_prefix="TM_BRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    core_factory: str | None = Field(
        default=None,
        description="Import path of the async core factory, as 'package.module:callable'",
    )
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format (console for humans, json for log aggregation)",
    )
    default_terminal_width: int = Field(
        default=120,
        ge=40,
        description="Terminal width assumed when it cannot be detected",
    )


@lru_cache(maxsize=1)
def get_settings() -> BridgeSettings:
    """Return the process-wide settings, loading them on first use."""
    return BridgeSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
