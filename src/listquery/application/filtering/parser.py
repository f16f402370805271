"""Application filtering – FilterParser.

Turns RHS filters (``status=eq:ENABLED``) into a validated Criteria tree.
Values given for one field combine with that field's combinator; different
fields always combine with AND.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from listquery.application.filtering.condition import Combinator, FilterCondition
from listquery.kernel.criteria import (
    EMPTY,
    Compare,
    Criteria,
    Equals,
    FilterOperator,
    In,
    Like,
    NotEquals,
    NotIn,
    NotLike,
    and_,
    or_,
)
from listquery.kernel.errors import InvalidFilterField, InvalidFilterOperator, InvalidFilterValue
from listquery.kernel.schema import FieldSchema, FieldSpec
from listquery.observability.logging import get_logger

logger = get_logger(__name__)

RawFilters = Mapping[str, "Iterable[str] | str"]


class FilterParser:
    """Parse request filters against a :class:`FieldSchema`."""

    def __init__(self, schema: FieldSchema) -> None:
        self._schema = schema

    @property
    def schema(self) -> FieldSchema:
        return self._schema

    def conditions(
        self,
        filters: RawFilters | None,
        combinators: Mapping[str, Combinator | str] | None = None,
    ) -> list[FilterCondition]:
        """Tokenize *filters* into one :class:`FilterCondition` per field.

        Fields are checked against the schema before their tokens are read.
        """
        combinators = combinators or {}
        result: list[FilterCondition] = []
        for field, tokens in (filters or {}).items():
            if field not in self._schema:
                raise InvalidFilterField(field)
            condition = FilterCondition.from_tokens(field, tokens, combinators.get(field))
            if condition.operator_values:
                result.append(condition)
        return result

    def parse(
        self,
        filters: RawFilters | None,
        combinators: Mapping[str, Combinator | str] | None = None,
    ) -> Criteria:
        """Return the Criteria for *filters*, or ``Empty`` when none are given."""
        return self.parse_conditions(self.conditions(filters, combinators))

    def parse_conditions(self, conditions: Iterable[FilterCondition]) -> Criteria:
        per_field: list[Criteria] = []
        for condition in conditions:
            spec = self._schema.get(condition.field)
            if spec is None:
                raise InvalidFilterField(condition.field)
            nodes = [self._node(condition.field, spec, op, raw) for op, raw in condition.operator_values]
            if condition.combinator is Combinator.OR:
                per_field.append(or_(*nodes))
            else:
                per_field.append(and_(*nodes))
        criteria = and_(*per_field)
        if not criteria.is_empty:
            logger.debug("filters_parsed", entity=self._schema.entity, criteria=str(criteria))
        return criteria

    def _node(self, field: str, spec: FieldSpec, operator: FilterOperator, raw: str) -> Criteria:
        if not spec.allows(operator):
            raise InvalidFilterOperator(field, operator.value)
        if operator.is_like:
            if operator is FilterOperator.NLK:
                return NotLike(field, raw)
            return Like(field, raw, ignore_case=operator is FilterOperator.ILK)
        if operator.is_multi_value:
            values = tuple(self._coerce(field, v) for v in _split_values(field, raw))
            return In(field, values) if operator is FilterOperator.IN else NotIn(field, values)
        value = self._coerce(field, raw)
        if operator is FilterOperator.EQ:
            return Equals(field, value)
        if operator is FilterOperator.NE:
            return NotEquals(field, value)
        return Compare(field, operator.compare_op, value)

    def _coerce(self, field: str, raw: str) -> Any:
        return self._schema.coerce(field, raw)


def _split_values(field: str, raw: str) -> list[str]:
    values = [v.strip() for v in raw.split(",") if v.strip()]
    if not values:
        raise InvalidFilterValue(field, raw, "expected at least one value")
    return values


__all__ = ["FilterParser"]
