"""Application filtering – FilterCondition and Combinator."""
from __future__ import annotations

import dataclasses
import re
from enum import Enum
from typing import Iterable

from listquery.kernel.criteria.operators import FilterOperator
from listquery.kernel.errors import InvalidFilterOperator

# A comma starts a new token only when an operator prefix follows it, so
# ``in:A,B`` stays one token while ``gte:1,lte:9`` becomes two.
_TOKEN_BOUNDARY = re.compile(
    r",\s*(?=(?:%s):)" % "|".join(sorted((op.value for op in FilterOperator), key=len, reverse=True)),
    re.IGNORECASE,
)


class Combinator(str, Enum):
    """How the values supplied for one field are combined."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, value: "Combinator | str | None", field: str = "") -> "Combinator":
        if value is None:
            return cls.AND
        if isinstance(value, Combinator):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise InvalidFilterOperator(
                field, str(value), f"Unsupported logical operator '{value}' for field '{field}'"
            ) from exc


def split_tokens(raw: Iterable[str] | str) -> list[str]:
    """Flatten raw ``operator:value`` strings into one token per pair."""
    items = [raw] if isinstance(raw, str) else list(raw)
    tokens: list[str] = []
    for item in items:
        if item is None:
            continue
        tokens.extend(t.strip() for t in _TOKEN_BOUNDARY.split(str(item)) if t.strip())
    return tokens


@dataclasses.dataclass(frozen=True)
class FilterCondition:
    """Filter on one field: ``(operator, raw value)`` pairs plus a combinator."""

    field: str
    operator_values: tuple[tuple[FilterOperator, str], ...]
    combinator: Combinator = Combinator.AND

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator_values", tuple(self.operator_values))

    @classmethod
    def from_tokens(
        cls,
        field: str,
        tokens: Iterable[str] | str,
        combinator: Combinator | str | None = None,
    ) -> "FilterCondition":
        """Build a condition from RHS tokens such as ``["eq:ENABLED", "ne:BLOCKED"]``.

        Raises :class:`InvalidFilterOperator` for malformed tokens or unknown
        operators.
        """
        pairs: list[tuple[FilterOperator, str]] = []
        for token in split_tokens(tokens):
            name, sep, value = token.partition(":")
            if not sep:
                raise InvalidFilterOperator(
                    field, token, f"Malformed filter '{token}' for field '{field}', expected operator:value"
                )
            operator = FilterOperator.parse(name)
            if operator is None:
                raise InvalidFilterOperator(field, name.strip())
            pairs.append((operator, value))
        return cls(field=field, operator_values=tuple(pairs), combinator=Combinator.parse(combinator, field))


__all__ = ["Combinator", "FilterCondition", "split_tokens"]
