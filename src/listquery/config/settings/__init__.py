"""Config settings – 12-factor env-based configuration."""
from listquery.config.settings.base import Settings
from listquery.config.settings.loaders import EnvSettingsLoader, SettingsLoader, build_settings
from listquery.config.settings.query import QuerySettings

__all__ = ["EnvSettingsLoader", "QuerySettings", "Settings", "SettingsLoader", "build_settings"]
