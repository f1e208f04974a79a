"""Typed runtime settings with dotenv support and default-on-absence resolution."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APPLICATION_PORT = 8080
DEFAULT_ENVIRONMENT_NAME = "development"

_MIN_TCP_PORT = 1
_MAX_TCP_PORT = 65535


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP listener.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port. Invalid values fall back to the default port.
        log_level: Log level handed to the ASGI server.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_APPLICATION_PORT, ge=_MIN_TCP_PORT, le=_MAX_TCP_PORT)
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = Field(default="info")

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_invalid_port(cls, value: object) -> int:
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_APPLICATION_PORT
        if port < _MIN_TCP_PORT or port > _MAX_TCP_PORT:
            return DEFAULT_APPLICATION_PORT
        return port

    @field_validator("host", mode="before")
    @classmethod
    def _fallback_blank_host(cls, value: object) -> str:
        stripped_value = str(value).strip()
        return stripped_value or "0.0.0.0"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        return str(value).strip().lower()


class RuntimeEnvironmentSettings(BaseSettings):
    """Runtime mode label reported by the liveness endpoint.

    Built on every health request, so it reads the process environment only
    and never the dotenv file.

    Attributes:
        node_env: Runtime environment label read from `NODE_ENV`.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
    )

    node_env: str = Field(default=DEFAULT_ENVIRONMENT_NAME)

    @field_validator("node_env", mode="before")
    @classmethod
    def _fallback_blank_label(cls, value: object) -> str:
        stripped_value = str(value).strip()
        return stripped_value or DEFAULT_ENVIRONMENT_NAME


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when a setting without a fallback is invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_resolve_environment_label() -> str:
    """Resolve the runtime environment label for a single health request.

    The label is read fresh on every call so changes to `NODE_ENV` are
    reflected without a restart.

    Returns:
        str: `NODE_ENV` value, or `development` when unset or blank.
    """

    return RuntimeEnvironmentSettings().node_env
