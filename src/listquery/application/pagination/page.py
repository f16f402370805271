"""Application pagination – CursorPage and OffsetPage."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class CursorPage(Generic[T]):
    """Keyset page: the rows plus opaque cursors to the adjacent pages."""

    data: list[T]
    next_page_cursor: str | None = None
    prev_page_cursor: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next_page_cursor is not None

    @property
    def has_previous(self) -> bool:
        return self.prev_page_cursor is not None

    def map(self, fn: Callable[[T], Any]) -> "CursorPage[Any]":
        """Return a new page with each row transformed by *fn*."""
        return CursorPage(
            data=[fn(item) for item in self.data],
            next_page_cursor=self.next_page_cursor,
            prev_page_cursor=self.prev_page_cursor,
        )

    def to_dict(self) -> dict[str, Any]:
        """camelCase form for the transport layer."""
        return {
            "data": list(self.data),
            "nextPageCursor": self.next_page_cursor,
            "prevPageCursor": self.prev_page_cursor,
        }


@dataclasses.dataclass(frozen=True)
class OffsetPage(Generic[T]):
    """Offset page with 1-based ``page`` numbers."""

    data: list[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total_elements <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "OffsetPage[Any]":
        return OffsetPage(
            data=[fn(item) for item in self.data],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": list(self.data),
            "page": self.page,
            "size": self.size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
        }


__all__ = ["CursorPage", "OffsetPage"]
