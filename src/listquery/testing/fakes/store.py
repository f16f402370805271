"""Testing fakes – InMemoryRowStore."""
from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from listquery.application.pagination.store import StoreQuery
from listquery.kernel.criteria import Criteria, matches, read_field

T = TypeVar("T")


class InMemoryRowStore(Generic[T]):
    """:class:`~listquery.application.pagination.RowStore` over a list of rows.

    Rows may be mappings or objects. Every call is recorded in ``calls`` so
    tests can assert how (and whether) the store was used. Set ``error`` to
    make the next calls fail with that exception.
    """

    def __init__(self, rows: Iterable[T] = (), *, error: BaseException | None = None) -> None:
        self.rows: list[T] = list(rows)
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    def add(self, *rows: T) -> None:
        self.rows.extend(rows)

    def remove(self, predicate: Any) -> None:
        self.rows = [r for r in self.rows if not predicate(r)]

    def _select(self, query: StoreQuery) -> list[T]:
        found = [r for r in self.rows if matches(query.criteria, r)]
        # Stable sorts applied from the least significant key upwards.
        for directive in reversed(query.sort.directives):
            found.sort(
                key=lambda r, f=directive.field: read_field(r, f),
                reverse=directive.direction.value == "DESC",
            )
        return found[query.offset: query.offset + query.limit]

    async def fetch(self, query: StoreQuery) -> list[T]:
        self.calls.append(("fetch", query))
        if self.error is not None:
            raise self.error
        return self._select(query)

    async def count(self, criteria: Criteria) -> int:
        self.calls.append(("count", criteria))
        if self.error is not None:
            raise self.error
        return sum(1 for r in self.rows if matches(criteria, r))


__all__ = ["InMemoryRowStore"]
