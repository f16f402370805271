"""Application search – SearchCompiler.

A free-text term becomes a case-insensitive "contains" match on every
searchable field, combined with OR: a hit on any one field qualifies the
row. Filters on different fields combine with AND instead.
"""
from __future__ import annotations

from typing import Sequence

from listquery.kernel.criteria import EMPTY, Criteria, Like, contains_pattern, or_
from listquery.kernel.errors import InvalidFilterField
from listquery.kernel.schema import FieldSchema
from listquery.observability.logging import get_logger

logger = get_logger(__name__)


class SearchCompiler:
    """Compile search terms for one entity.

    ``fields`` narrows the search to a subset of the schema's searchable
    fields; by default every searchable field is used, in schema order.
    """

    def __init__(self, schema: FieldSchema, fields: Sequence[str] | None = None) -> None:
        searchable = schema.searchable_fields
        if fields is None:
            self._fields = searchable
        else:
            for name in fields:
                if name not in searchable:
                    raise InvalidFilterField(name, f"Field '{name}' is not searchable")
            self._fields = tuple(fields)
        self._entity = schema.entity

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def compile(self, term: str | None) -> Criteria:
        if term is None or not term.strip():
            return EMPTY
        pattern = contains_pattern(term.strip())
        criteria = or_(*(Like(field, pattern, ignore_case=True) for field in self._fields))
        logger.debug("search_compiled", entity=self._entity, criteria=str(criteria))
        return criteria


__all__ = ["SearchCompiler"]
