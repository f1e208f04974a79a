"""Configuration package for runtime settings and environment resolution."""

from .settings import (
    DEFAULT_APPLICATION_PORT,
    DEFAULT_ENVIRONMENT_NAME,
    AppSettings,
    RuntimeEnvironmentSettings,
    SettingsLoadError,
    config_load_settings,
    config_resolve_environment_label,
)

__all__ = [
    "DEFAULT_APPLICATION_PORT",
    "DEFAULT_ENVIRONMENT_NAME",
    "AppSettings",
    "RuntimeEnvironmentSettings",
    "SettingsLoadError",
    "config_load_settings",
    "config_resolve_environment_label",
]
