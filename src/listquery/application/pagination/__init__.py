"""Application pagination – cursors, keyset predicates, pages and assembly."""
from listquery.application.pagination.assembler import DEFAULT_MAX_PAGE_SIZE, PageAssembler
from listquery.application.pagination.cursor import CURSOR_VERSION, CursorCodec, CursorDirection, CursorPosition
from listquery.application.pagination.keyset import keyset_criteria
from listquery.application.pagination.page import CursorPage, OffsetPage
from listquery.application.pagination.store import RowStore, StoreQuery

__all__ = [
    "CURSOR_VERSION",
    "CursorCodec",
    "CursorDirection",
    "CursorPage",
    "CursorPosition",
    "DEFAULT_MAX_PAGE_SIZE",
    "OffsetPage",
    "PageAssembler",
    "RowStore",
    "StoreQuery",
    "keyset_criteria",
]
