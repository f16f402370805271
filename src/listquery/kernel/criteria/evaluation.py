"""Criteria – in-memory evaluation against mappings or plain objects."""
from __future__ import annotations

import functools
import re
from collections.abc import Mapping
from typing import Any

from listquery.kernel.criteria.nodes import (
    And,
    Compare,
    Criteria,
    Empty,
    Equals,
    In,
    Like,
    NotEquals,
    NotIn,
    NotLike,
    Or,
)
from listquery.kernel.criteria.operators import CompareOp
from listquery.kernel.criteria.patterns import like_to_regex

_MISSING = object()


def read_field(row: Any, field: str, default: Any = _MISSING) -> Any:
    """Read *field* from a mapping (by key) or an object (by attribute).

    Raises ``KeyError`` when the field is absent and no *default* is given.
    """
    if isinstance(row, Mapping):
        if field in row:
            return row[field]
    elif hasattr(row, field):
        return getattr(row, field)
    if default is _MISSING:
        raise KeyError(field)
    return default


@functools.lru_cache(maxsize=256)
def _compiled(pattern: str, ignore_case: bool) -> re.Pattern[str]:
    return like_to_regex(pattern, ignore_case=ignore_case)


def _like(value: Any, pattern: str, ignore_case: bool) -> bool:
    if value is None:
        return False
    return _compiled(pattern, ignore_case).fullmatch(str(value)) is not None


def _compare(value: Any, op: CompareOp, other: Any) -> bool:
    if value is None or other is None:
        return False
    match op:
        case CompareOp.GT:
            return value > other
        case CompareOp.GTE:
            return value >= other
        case CompareOp.LT:
            return value < other
        case CompareOp.LTE:
            return value <= other
    raise ValueError(f"Unsupported comparison: {op}")


def matches(criteria: Criteria, row: Any) -> bool:
    """Return ``True`` when *row* satisfies *criteria*.

    Missing fields read as ``None``. As in SQL, ``None`` never satisfies an
    ordering comparison, a LIKE pattern, or a negated predicate.
    """
    match criteria:
        case Empty():
            return True
        case And(children=children):
            return all(matches(c, row) for c in children)
        case Or(children=children):
            return any(matches(c, row) for c in children)
        case Equals(field=field, value=value):
            return read_field(row, field, None) == value
        case NotEquals(field=field, value=value):
            actual = read_field(row, field, None)
            return actual is not None and actual != value
        case Compare(field=field, op=op, value=value):
            return _compare(read_field(row, field, None), op, value)
        case Like(field=field, pattern=pattern, ignore_case=ignore_case):
            return _like(read_field(row, field, None), pattern, ignore_case)
        case NotLike(field=field, pattern=pattern):
            value = read_field(row, field, None)
            return value is not None and not _like(value, pattern, False)
        case In(field=field, values=values):
            return read_field(row, field, None) in values
        case NotIn(field=field, values=values):
            actual = read_field(row, field, None)
            return actual is not None and actual not in values
    raise TypeError(f"Unsupported criteria node: {type(criteria).__name__}")


__all__ = ["matches", "read_field"]
