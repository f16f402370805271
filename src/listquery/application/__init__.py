"""Application – filtering, search, sorting and pagination use cases."""

from listquery.application.composition import CriteriaComposer, scope_equals
from listquery.application.filtering import Combinator, FilterCondition, FilterParser
from listquery.application.listing import ListQueryService, ListRequest
from listquery.application.pagination import (
    CursorCodec,
    CursorDirection,
    CursorPage,
    CursorPosition,
    OffsetPage,
    PageAssembler,
    RowStore,
    StoreQuery,
)
from listquery.application.search import SearchCompiler
from listquery.application.sorting import SortDirection, SortDirective, SortParser, SortSpec

__all__ = [
    "Combinator",
    "CriteriaComposer",
    "CursorCodec",
    "CursorDirection",
    "CursorPage",
    "CursorPosition",
    "FilterCondition",
    "FilterParser",
    "ListQueryService",
    "ListRequest",
    "OffsetPage",
    "PageAssembler",
    "RowStore",
    "SearchCompiler",
    "SortDirection",
    "SortDirective",
    "SortParser",
    "SortSpec",
    "StoreQuery",
    "scope_equals",
]
