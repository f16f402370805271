"""SQLAlchemy adapter – SqlAlchemyRowStore."""
from __future__ import annotations

from typing import Any, Callable, Mapping

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import FromClause

from listquery.adapters.sqlalchemy.criteria import SqlAlchemyCriteriaCompiler
from listquery.application.pagination import StoreQuery
from listquery.kernel.criteria import Criteria
from listquery.observability.logging import get_logger

logger = get_logger(__name__)


class SqlAlchemyRowStore:
    """:class:`~listquery.application.pagination.RowStore` over one table.

    Rows come back as dicts keyed by schema field name. *columns* maps field
    names to column names when they differ (``{"createdAt": "created_at"}``);
    unmapped table columns keep their own name.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        table: FromClause,
        columns: Mapping[str, str] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._table = table
        renamed = dict(columns or {})
        mapped = set(renamed.values())
        fields = {name: table.c[name] for name in table.c.keys() if name not in mapped}
        fields.update({field: table.c[column] for field, column in renamed.items()})
        self._fields = fields
        self._compiler = SqlAlchemyCriteriaCompiler(fields)

    @property
    def compiler(self) -> SqlAlchemyCriteriaCompiler:
        return self._compiler

    async def fetch(self, query: StoreQuery) -> list[dict[str, Any]]:
        stmt = (
            select(*(column.label(field) for field, column in self._fields.items()))
            .where(self._compiler.compile(query.criteria))
            .order_by(*self._compiler.order_by(query.sort))
            .limit(query.limit)
        )
        if query.offset:
            stmt = stmt.offset(query.offset)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]
        logger.debug("sqlalchemy_fetch", table=getattr(self._table, "name", None), rows=len(rows))
        return rows

    async def count(self, criteria: Criteria) -> int:
        stmt = select(func.count()).select_from(self._table).where(self._compiler.compile(criteria))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())


__all__ = ["SqlAlchemyRowStore"]
