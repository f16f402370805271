"""Application sorting – SortParser.

Tokens read ``direction:field`` (``asc:email``, ``desc:createdAt``). The
schema's tie-breaker is always appended so that rows with equal sort keys
still have a total order, which keyset pagination depends on.
Directives after an explicit tie-breaker are dropped: the tie-breaker is
unique, so later keys can never change the order, and it must stay last for
cursors to carry its value.
"""
from __future__ import annotations

from typing import Iterable

from listquery.application.sorting.directive import SortDirection, SortDirective, SortSpec
from listquery.kernel.errors import InvalidSortDirection, InvalidSortField
from listquery.kernel.schema import FieldSchema

DEFAULT_TIE_BREAK_DIRECTION = SortDirection.DESC


class SortParser:
    def __init__(self, schema: FieldSchema) -> None:
        self._schema = schema

    def parse(self, tokens: Iterable[str] | str | None) -> SortSpec:
        directives = self._directives(_flatten(tokens))
        if not directives:
            directives = self._directives(list(self._schema.default_sort))
        tie = self._schema.tie_breaker
        fields = [d.field for d in directives]
        if tie in fields:
            del directives[fields.index(tie) + 1 :]
        else:
            direction = directives[-1].direction if directives else DEFAULT_TIE_BREAK_DIRECTION
            directives.append(SortDirective(tie, direction))
        return SortSpec(tuple(directives))

    def _directives(self, tokens: list[str]) -> list[SortDirective]:
        directives: list[SortDirective] = []
        seen: set[str] = set()
        for token in tokens:
            direction_text, sep, field = token.partition(":")
            field = field.strip()
            if not sep or not field:
                raise InvalidSortDirection(token)
            spec = self._schema.get(field)
            if spec is None:
                raise InvalidSortField(field, f"Unknown sort field '{field}'")
            if not spec.sortable:
                raise InvalidSortField(field)
            direction = SortDirection.parse(direction_text)
            if direction is None:
                raise InvalidSortDirection(token)
            if field in seen:
                raise InvalidSortField(field, f"Sort field '{field}' is repeated")
            seen.add(field)
            directives.append(SortDirective(field, direction))
        return directives


def _flatten(tokens: Iterable[str] | str | None) -> list[str]:
    if tokens is None:
        return []
    items = [tokens] if isinstance(tokens, str) else list(tokens)
    return [part.strip() for item in items for part in str(item).split(",") if part.strip()]


__all__ = ["DEFAULT_TIE_BREAK_DIRECTION", "SortParser"]
