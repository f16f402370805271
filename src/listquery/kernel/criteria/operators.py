"""Criteria operators – RHS filter tokens and comparison operators."""
from __future__ import annotations

from enum import Enum


class CompareOp(str, Enum):
    """Ordering comparison carried by :class:`~listquery.kernel.criteria.Compare`."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    CompareOp.GT: ">",
    CompareOp.GTE: ">=",
    CompareOp.LT: "<",
    CompareOp.LTE: "<=",
}


class FilterOperator(str, Enum):
    """Operator named on the right-hand side of a filter (``status=eq:ENABLED``)."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LK = "lk"
    ILK = "ilk"
    NLK = "nlk"
    IN = "in"
    NIN = "nin"

    @property
    def is_like(self) -> bool:
        return self in (FilterOperator.LK, FilterOperator.ILK, FilterOperator.NLK)

    @property
    def is_ordering(self) -> bool:
        return self in (FilterOperator.GT, FilterOperator.GTE, FilterOperator.LT, FilterOperator.LTE)

    @property
    def is_multi_value(self) -> bool:
        return self in (FilterOperator.IN, FilterOperator.NIN)

    @property
    def compare_op(self) -> CompareOp:
        if not self.is_ordering:
            raise ValueError(f"{self.value!r} is not an ordering operator")
        return CompareOp(self.value)

    @classmethod
    def parse(cls, token: str) -> "FilterOperator | None":
        """Return the operator for *token* (case-insensitive) or ``None``."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            return None


__all__ = ["CompareOp", "FilterOperator"]
