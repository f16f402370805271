"""Config – env-based settings and configuration errors."""

from listquery.config.settings import EnvSettingsLoader, QuerySettings, Settings, SettingsLoader, build_settings
from listquery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SchemaDefinitionError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "SchemaDefinitionError",
    "Settings",
    "SettingsLoader",
    "build_settings",
]
