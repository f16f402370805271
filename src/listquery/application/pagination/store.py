"""Application pagination – the RowStore port.

The persistence collaborator receives a Criteria tree, a sort and a row
window, and returns rows in sort order. Translating that into a concrete
query language is its job, not the engine's.
"""
from __future__ import annotations

import dataclasses
from typing import Protocol, Sequence, TypeVar, runtime_checkable

from listquery.application.sorting import SortSpec
from listquery.kernel.criteria import Criteria

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class StoreQuery:
    """One window of rows matching ``criteria`` ordered by ``sort``."""

    criteria: Criteria
    sort: SortSpec
    limit: int
    offset: int = 0


@runtime_checkable
class RowStore(Protocol[T]):
    async def fetch(self, query: StoreQuery) -> Sequence[T]: ...
    async def count(self, criteria: Criteria) -> int: ...


__all__ = ["RowStore", "StoreQuery"]
