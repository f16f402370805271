"""Config settings – QuerySettings for the list query engine."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Mapping

from listquery.config.settings.base import Settings
from listquery.config.settings.loaders import EnvSettingsLoader, build_settings
from listquery.config.validation import InvalidSettingValueError

MIN_SECRET_LENGTH = 16


@dataclasses.dataclass
class QuerySettings(Settings):
    """Engine settings, read from ``LISTQUERY_*`` environment variables.

    ``max_page_size`` is the hard cap on rows per page; it bounds the load a
    single request can put on the store.
    """

    _prefix: ClassVar[str] = "LISTQUERY"

    cursor_secret: str
    default_page_size: int = 20
    max_page_size: int = 100
    max_cursor_length: int = 2048

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> "QuerySettings":
        """Read ``LISTQUERY_*`` variables; keyword *overrides* win over the environment.

        Raises :class:`MissingRequiredSettingError` naming
        ``LISTQUERY_CURSOR_SECRET`` when no secret is given either way.
        """
        values = EnvSettingsLoader(environ).read(cls)
        values.update(overrides)
        return build_settings(cls, values)

    def _validate(self) -> None:
        if len(self.cursor_secret) < MIN_SECRET_LENGTH:
            raise InvalidSettingValueError(
                "cursor_secret", "***", f"must be at least {MIN_SECRET_LENGTH} characters"
            )
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be positive")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and max_page_size ({self.max_page_size})",
            )
        if self.max_cursor_length < 64:
            raise InvalidSettingValueError("max_cursor_length", self.max_cursor_length, "must be at least 64")

    def __repr__(self) -> str:
        return (
            f"QuerySettings(cursor_secret='***', default_page_size={self.default_page_size}, "
            f"max_page_size={self.max_page_size}, max_cursor_length={self.max_cursor_length})"
        )


__all__ = ["MIN_SECRET_LENGTH", "QuerySettings"]
