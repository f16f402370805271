"""Application pagination – PageAssembler.

Keyset pages over-fetch by one row: asking the store for ``size + 1`` rows
tells whether another page exists without a count query. The extra row is
never returned.
"""
from __future__ import annotations

from typing import Generic, TypeVar

from listquery.application.pagination.cursor import CursorCodec, CursorDirection, CursorPosition
from listquery.application.pagination.keyset import keyset_criteria
from listquery.application.pagination.page import CursorPage, OffsetPage
from listquery.application.pagination.store import RowStore, StoreQuery
from listquery.application.sorting import SortSpec
from listquery.kernel.criteria import Criteria, and_
from listquery.kernel.errors import InvalidPageRequest, InvalidPageSize
from listquery.observability.logging import get_logger

T = TypeVar("T")

DEFAULT_MAX_PAGE_SIZE = 100

logger = get_logger(__name__)


class PageAssembler(Generic[T]):
    """Run one page query against a :class:`RowStore` and derive cursors.

    Every argument is validated, and a string cursor decoded, before the
    store is called. Store errors propagate unchanged.
    """

    def __init__(
        self,
        store: RowStore[T],
        codec: CursorCodec,
        *,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        self._store = store
        self._codec = codec
        self._max_page_size = max_page_size

    def check_size(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or not 1 <= size <= self._max_page_size:
            raise InvalidPageSize(size, self._max_page_size)

    async def fetch_page(
        self,
        criteria: Criteria,
        sort: SortSpec,
        size: int,
        cursor: str | CursorPosition | None = None,
    ) -> CursorPage[T]:
        self.check_size(size)
        position = self._codec.decode(cursor, sort) if isinstance(cursor, str) else cursor

        if position is not None and position.direction is CursorDirection.BEFORE:
            return await self._fetch_before(criteria, sort, size, position)

        query_criteria = criteria
        if position is not None:
            query_criteria = and_(criteria, keyset_criteria(sort, position.values))
        rows = await self._fetch(StoreQuery(query_criteria, sort, limit=size + 1))

        data = rows[:size]
        next_cursor = self._codec.encode(data[-1], sort) if len(rows) > size else None
        prev_cursor = None
        if position is not None and data:
            prev_cursor = self._codec.encode(data[0], sort, CursorDirection.BEFORE)
        return CursorPage(data=data, next_page_cursor=next_cursor, prev_page_cursor=prev_cursor)

    async def _fetch_before(
        self,
        criteria: Criteria,
        sort: SortSpec,
        size: int,
        position: CursorPosition,
    ) -> CursorPage[T]:
        # Read backwards with the reversed sort, then restore sort order.
        backwards = sort.reversed()
        query_criteria = and_(criteria, keyset_criteria(backwards, position.values))
        rows = await self._fetch(StoreQuery(query_criteria, backwards, limit=size + 1))

        data = list(reversed(rows[:size]))
        prev_cursor = None
        if len(rows) > size:
            prev_cursor = self._codec.encode(data[0], sort, CursorDirection.BEFORE)
        next_cursor = self._codec.encode(data[-1], sort) if data else None
        return CursorPage(data=data, next_page_cursor=next_cursor, prev_page_cursor=prev_cursor)

    async def fetch_offset_page(
        self,
        criteria: Criteria,
        sort: SortSpec,
        page: int,
        size: int,
    ) -> OffsetPage[T]:
        self.check_size(size)
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise InvalidPageRequest(f"Page must be a positive integer, got {page!r}")
        total = await self._store.count(criteria)
        rows = await self._fetch(StoreQuery(criteria, sort, limit=size, offset=(page - 1) * size))
        return OffsetPage(data=rows, page=page, size=size, total_elements=total)

    async def _fetch(self, query: StoreQuery) -> list[T]:
        logger.debug(
            "store_fetch",
            criteria=str(query.criteria),
            sort=query.sort.signature,
            limit=query.limit,
            offset=query.offset,
        )
        return list(await self._store.fetch(query))


__all__ = ["DEFAULT_MAX_PAGE_SIZE", "PageAssembler"]
