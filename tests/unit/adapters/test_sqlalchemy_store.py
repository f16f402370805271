"""Unit tests for the SQLAlchemy adapter (criteria compiler and row store).

Uses an in-memory SQLite database via *aiosqlite*; no running server needed.
"""
from __future__ import annotations

import asyncio
import datetime
from typing import Any

import pytest
from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table
from sqlalchemy.pool import StaticPool

from listquery.adapters.sqlalchemy import SqlAlchemyCriteriaCompiler, SqlAlchemyRowStore, SqlAlchemySessionFactory
from listquery.application.listing import ListQueryService, ListRequest
from listquery.application.pagination import CursorCodec, PageAssembler, RowStore, StoreQuery, keyset_criteria
from listquery.application.sorting import SortDirection, SortDirective, SortSpec
from listquery.config import QuerySettings
from listquery.kernel.criteria import (
    EMPTY,
    Compare,
    CompareOp,
    Criteria,
    Equals,
    In,
    Like,
    NotEquals,
    NotIn,
    NotLike,
    and_,
    contains_pattern,
    matches,
    or_,
)
from listquery.kernel.schema import FieldKind, FieldSchema, FieldSpec

# ---------------------------------------------------------------------------
# Shared table, schema and rows
# ---------------------------------------------------------------------------

metadata = MetaData()

subscribers = Table(
    "subscribers",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("workspace_id", String(32), nullable=False),
    Column("email", String(128), nullable=False),
    Column("status", String(16), nullable=False),
    Column("created_at", DateTime, nullable=False),
)

COLUMNS = {"workspaceId": "workspace_id", "createdAt": "created_at"}

SCHEMA = FieldSchema(
    entity="subscriber",
    fields={
        "id": FieldSpec(FieldKind.NUMBER, sortable=True),
        "workspaceId": FieldSpec(FieldKind.STRING, allowed_operators=frozenset()),
        "email": FieldSpec(FieldKind.STRING, sortable=True, searchable=True),
        "status": FieldSpec(FieldKind.ENUM, enum_values=("ENABLED", "DISABLED")),
        "createdAt": FieldSpec(FieldKind.DATE, sortable=True),
    },
    default_sort=("desc:createdAt",),
)

START = datetime.datetime(2024, 1, 1)


def _email(i: int) -> str:
    if i == 7:
        return "promo_100%@example.com"
    if i % 4 == 0:
        return f"john.{i:02d}@example.com"
    return f"user{i:02d}@example.com"


ROWS: list[dict[str, Any]] = [
    {
        "id": i,
        "workspaceId": "W1" if i <= 9 else "W2",
        "email": _email(i),
        "status": ("ENABLED", "DISABLED")[i % 2],
        # Three rows per timestamp so that sorts on createdAt rely on the tie-breaker.
        "createdAt": START + datetime.timedelta(hours=i // 3),
    }
    for i in range(1, 13)
]


def _db_row(row: dict[str, Any]) -> dict[str, Any]:
    return {COLUMNS.get(k, k): v for k, v in row.items()}


async def _store() -> tuple[SqlAlchemySessionFactory, SqlAlchemyRowStore]:
    factory = SqlAlchemySessionFactory("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with factory.engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(subscribers.insert(), [_db_row(r) for r in ROWS])
    return factory, SqlAlchemyRowStore(factory, subscribers, COLUMNS)


def _sort(*pairs: tuple[str, SortDirection]) -> SortSpec:
    return SortSpec(tuple(SortDirective(f, d) for f, d in pairs))


BY_ID = _sort(("id", SortDirection.ASC))
BY_CREATED = _sort(("createdAt", SortDirection.DESC), ("id", SortDirection.DESC))


# ---------------------------------------------------------------------------
# SqlAlchemyCriteriaCompiler
# ---------------------------------------------------------------------------


class TestSqlAlchemyCriteriaCompiler:
    def test_unknown_field(self) -> None:
        compiler = SqlAlchemyCriteriaCompiler({"id": subscribers.c.id})
        with pytest.raises(ValueError, match="email"):
            compiler.compile(Equals("email", "x"))

    def test_like_uses_escape_character(self) -> None:
        compiler = SqlAlchemyCriteriaCompiler({"email": subscribers.c.email})
        sql = str(compiler.compile(Like("email", "%a\\%%")))
        assert "LIKE" in sql
        assert "ESCAPE" in sql

    def test_order_by(self) -> None:
        compiler = SqlAlchemyCriteriaCompiler({"id": subscribers.c.id, "createdAt": subscribers.c.created_at})
        clauses = [str(c) for c in compiler.order_by(BY_CREATED)]
        assert clauses == ["subscribers.created_at DESC", "subscribers.id DESC"]


# ---------------------------------------------------------------------------
# SqlAlchemyRowStore
# ---------------------------------------------------------------------------

CASES: list[Criteria] = [
    EMPTY,
    Equals("status", "ENABLED"),
    NotEquals("status", "ENABLED"),
    Compare("id", CompareOp.GT, 5),
    Compare("id", CompareOp.LTE, 3),
    Compare("createdAt", CompareOp.GTE, START + datetime.timedelta(hours=2)),
    Compare("createdAt", CompareOp.LT, START + datetime.timedelta(hours=1)),
    Like("email", "%JOHN%", ignore_case=True),
    Like("email", contains_pattern("100%"), ignore_case=True),
    Like("email", "user0_@%"),
    NotLike("email", "%john%"),
    In("id", (1, 2, 3)),
    NotIn("status", ("ENABLED",)),
    and_(Equals("workspaceId", "W1"), or_(Equals("status", "ENABLED"), Compare("id", CompareOp.GT, 10))),
    keyset_criteria(BY_CREATED, (START + datetime.timedelta(hours=2), 7)),
]


class TestSqlAlchemyRowStore:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(SqlAlchemyRowStore(lambda: None, subscribers, COLUMNS), RowStore)  # type: ignore[arg-type]

    def test_rows_keyed_by_field_name(self) -> None:
        async def run() -> list[dict[str, Any]]:
            factory, store = await _store()
            try:
                return await store.fetch(StoreQuery(Equals("id", 1), BY_ID, limit=5))
            finally:
                await factory.dispose()

        assert asyncio.run(run()) == [ROWS[0]]

    @pytest.mark.parametrize("criteria", CASES, ids=str)
    def test_matches_in_memory_evaluation(self, criteria: Criteria) -> None:
        async def run() -> tuple[list[int], int]:
            factory, store = await _store()
            try:
                rows = await store.fetch(StoreQuery(criteria, BY_ID, limit=100))
                return [r["id"] for r in rows], await store.count(criteria)
            finally:
                await factory.dispose()

        expected = [r["id"] for r in ROWS if matches(criteria, r)]
        ids, total = asyncio.run(run())
        assert ids == expected
        assert total == len(expected)

    def test_order_limit_offset(self) -> None:
        async def run() -> list[int]:
            factory, store = await _store()
            try:
                rows = await store.fetch(StoreQuery(EMPTY, BY_CREATED, limit=4, offset=2))
                return [r["id"] for r in rows]
            finally:
                await factory.dispose()

        assert asyncio.run(run()) == [10, 9, 8, 7]

    def test_exhaustive_keyset_pagination(self) -> None:
        assembler_sort = BY_CREATED

        async def run() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
            factory, store = await _store()
            try:
                assembler = PageAssembler(store, CursorCodec("sqlalchemy-test-secret", SCHEMA))
                collected: list[dict[str, Any]] = []
                page = await assembler.fetch_page(EMPTY, assembler_sort, 5)
                collected.extend(page.data)
                while page.next_page_cursor is not None:
                    page = await assembler.fetch_page(EMPTY, assembler_sort, 5, page.next_page_cursor)
                    collected.extend(page.data)
                full = await store.fetch(StoreQuery(EMPTY, assembler_sort, limit=100))
                return collected, full
            finally:
                await factory.dispose()

        collected, full = asyncio.run(run())
        assert collected == full
        assert [r["id"] for r in collected] == list(range(12, 0, -1))


class TestListQueryServiceOverSqlAlchemy:
    def test_scoped_search_and_filter(self) -> None:
        settings = QuerySettings(cursor_secret="sqlalchemy-test-secret", default_page_size=2)

        async def run() -> list[list[int]]:
            factory, store = await _store()
            try:
                service = ListQueryService(SCHEMA, store, settings, scope_field="workspaceId")
                request = ListRequest(search="john", filters={"status": "in:ENABLED,DISABLED"})
                pages: list[list[int]] = []
                cursor = None
                while True:
                    page = await service.list(
                        ListRequest(search=request.search, filters=request.filters, cursor=cursor), "W1"
                    )
                    pages.append([r["id"] for r in page.data])
                    cursor = page.next_page_cursor
                    if cursor is None:
                        return pages
            finally:
                await factory.dispose()

        assert asyncio.run(run()) == [[8, 4]]
