"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from listquery.config.settings.base import Settings
from listquery.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables named ``<PREFIX>_<FIELD>``."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "").upper()
        return f"{prefix}_{field_name}".upper().lstrip("_")

    def read(self, settings_class: type[T]) -> dict[str, Any]:
        """Coerced values of the variables that are set; absent ones are left out."""
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = self.env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is not None:
                values[field.name] = self._coerce(key, raw, field.type)
        return values

    def load(self, settings_class: type[T]) -> T:
        return build_settings(settings_class, self.read(settings_class))

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise ConfigError(f"Setting '{key}' must be an integer, got {value!r}") from exc
        return value


def build_settings(settings_class: type[T], values: Mapping[str, Any]) -> T:
    """Construct *settings_class* from *values*, naming the variable of any missing field."""
    for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
        if (
            field.name not in values
            and field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
        ):
            raise MissingRequiredSettingError(EnvSettingsLoader.env_key(settings_class, field.name))
    try:
        return settings_class(**values)
    except ConfigError:
        raise
    except TypeError as exc:
        raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader", "build_settings"]
