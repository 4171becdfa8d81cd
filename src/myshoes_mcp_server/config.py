"""Runtime settings read from ``MYSHOES_*`` environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from myshoes_mcp_server.client import DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Server settings; explicit keyword arguments win over the environment."""

    model_config = SettingsConfigDict(env_prefix="MYSHOES_", case_sensitive=False)

    host: str = ""
    enable_command_logging: bool = False
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("host", mode="before")
    @classmethod
    def strip_host(cls, v: object) -> object:
        """Ignore surrounding whitespace so a blank value counts as missing."""
        if isinstance(v, str):
            return v.strip()
        return v


class ConfigurationError(ValueError):
    """Raised when the settings cannot start a server."""


def require_host(settings: Settings) -> str:
    """Return the configured host or fail with a descriptive error."""
    if not settings.host:
        raise ConfigurationError(
            "host is required (pass --host or set MYSHOES_HOST)"
        )
    return settings.host
