"""Field schema – value kinds and raw value coercion."""
from __future__ import annotations

import re
import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from listquery.kernel.criteria.operators import FilterOperator

_INT_RE = re.compile(r"[+-]?\d+")
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class FieldKind(str, Enum):
    """Kind of value a queryable field holds."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    ENUM = "enum"
    BOOLEAN = "boolean"
    UUID = "uuid"

    @property
    def default_operators(self) -> frozenset[FilterOperator]:
        return _DEFAULT_OPERATORS[self]

    def coerce(self, raw: Any, enum_values: tuple[str, ...] = ()) -> Any:
        """Convert a raw request value into this kind.

        Raises ``ValueError`` with a short reason when *raw* does not fit.
        """
        if isinstance(raw, Enum):
            raw = raw.value
        if self.accepts(raw, enum_values):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"expected {self.value}, got {type(raw).__name__}")
        text = raw.strip()
        match self:
            case FieldKind.STRING:
                return raw
            case FieldKind.NUMBER:
                return _to_number(text)
            case FieldKind.DATE:
                return _to_datetime(text)
            case FieldKind.ENUM:
                raise ValueError(f"expected one of {', '.join(enum_values)}")
            case FieldKind.BOOLEAN:
                if text.lower() in _TRUE:
                    return True
                if text.lower() in _FALSE:
                    return False
                raise ValueError("expected a boolean")
            case FieldKind.UUID:
                try:
                    return uuid.UUID(text)
                except ValueError as exc:
                    raise ValueError("expected a UUID") from exc
        raise ValueError(f"unsupported kind {self.value}")

    def accepts(self, value: Any, enum_values: tuple[str, ...] = ()) -> bool:
        """Return ``True`` when *value* is already a valid value of this kind."""
        match self:
            case FieldKind.STRING:
                return isinstance(value, str)
            case FieldKind.NUMBER:
                return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
            case FieldKind.DATE:
                return isinstance(value, (datetime, date))
            case FieldKind.ENUM:
                if isinstance(value, Enum):
                    value = value.value
                return isinstance(value, str) and value in enum_values
            case FieldKind.BOOLEAN:
                return isinstance(value, bool)
            case FieldKind.UUID:
                return isinstance(value, uuid.UUID)
        return False


def _to_number(text: str) -> int | Decimal:
    if _INT_RE.fullmatch(text):
        return int(text)
    try:
        number = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError("expected a number") from exc
    if not number.is_finite():
        raise ValueError("expected a finite number")
    return number


def _to_datetime(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValueError("expected an ISO-8601 date") from exc


_EQUALITY = frozenset({FilterOperator.EQ, FilterOperator.NE})
_MEMBERSHIP = frozenset({FilterOperator.IN, FilterOperator.NIN})
_ORDERING = frozenset({FilterOperator.GT, FilterOperator.GTE, FilterOperator.LT, FilterOperator.LTE})
_LIKE = frozenset({FilterOperator.LK, FilterOperator.ILK, FilterOperator.NLK})

_DEFAULT_OPERATORS: dict[FieldKind, frozenset[FilterOperator]] = {
    FieldKind.STRING: _EQUALITY | _MEMBERSHIP | _LIKE,
    FieldKind.NUMBER: _EQUALITY | _MEMBERSHIP | _ORDERING,
    FieldKind.DATE: _EQUALITY | _MEMBERSHIP | _ORDERING,
    FieldKind.ENUM: _EQUALITY | _MEMBERSHIP,
    FieldKind.BOOLEAN: _EQUALITY,
    FieldKind.UUID: _EQUALITY | _MEMBERSHIP,
}


__all__ = ["FieldKind"]
