"""Observability – SensitiveFieldsFilter structlog processor."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

REDACTED = "[REDACTED]"
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({"cursor_secret", "secret", "password", "token", "authorization"})
DEFAULT_SENSITIVE_SUFFIXES: tuple[str, ...] = ("_secret", "_token", "_password")


class SensitiveFieldsFilter:
    """Scrub secrets from an event dict before it is rendered.

    A key is sensitive when its lower-cased name is listed or ends with one of
    the suffixes, so ``cursor_secret`` and ``signing_secret`` are both caught.
    Values under nested mappings and inside lists (settings dumps, batches of
    store queries) are scrubbed as well.
    """

    def __init__(
        self,
        sensitive_fields: Iterable[str] | None = None,
        suffixes: Iterable[str] = DEFAULT_SENSITIVE_SUFFIXES,
    ) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))
        self._suffixes = tuple(s.lower() for s in suffixes)

    def is_sensitive(self, key: str) -> bool:
        key = key.lower()
        return key in self._fields or key.endswith(self._suffixes)

    def scrub(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                k: REDACTED if isinstance(k, str) and self.is_sensitive(k) else self.scrub(v)
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [self.scrub(v) for v in value]
        if type(value) is tuple:
            return tuple(self.scrub(v) for v in value)
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.scrub(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "DEFAULT_SENSITIVE_SUFFIXES", "REDACTED", "SensitiveFieldsFilter"]
