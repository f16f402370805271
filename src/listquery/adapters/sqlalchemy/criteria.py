"""SQLAlchemy adapter – Criteria to SQLAlchemy Core expressions."""
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import and_, false, or_, true
from sqlalchemy.sql.elements import ColumnElement

from listquery.application.sorting import SortDirection, SortSpec
from listquery.kernel.criteria import (
    LIKE_ESCAPE,
    And,
    Compare,
    CompareOp,
    Criteria,
    Empty,
    Equals,
    In,
    Like,
    NotEquals,
    NotIn,
    NotLike,
    Or,
)


class SqlAlchemyCriteriaCompiler:
    """Translate Criteria trees into SQLAlchemy boolean clauses.

    *columns* maps each schema field name to the column it is stored in;
    a field without a column raises ``ValueError``.
    """

    def __init__(self, columns: Mapping[str, ColumnElement[Any]]) -> None:
        self._columns = dict(columns)

    def column(self, field: str) -> ColumnElement[Any]:
        try:
            return self._columns[field]
        except KeyError:
            raise ValueError(f"Field '{field}' has no mapped column") from None

    def compile(self, criteria: Criteria) -> ColumnElement[bool]:
        match criteria:
            case Empty():
                return true()
            case And(children=children):
                return and_(*(self.compile(c) for c in children)) if children else true()
            case Or(children=children):
                return or_(*(self.compile(c) for c in children)) if children else false()
            case Equals(field=field, value=value):
                return self.column(field) == value
            case NotEquals(field=field, value=value):
                return self.column(field) != value
            case Compare(field=field, op=op, value=value):
                return self._compare(self.column(field), op, value)
            case Like(field=field, pattern=pattern, ignore_case=True):
                return self.column(field).ilike(pattern, escape=LIKE_ESCAPE)
            case Like(field=field, pattern=pattern):
                return self.column(field).like(pattern, escape=LIKE_ESCAPE)
            case NotLike(field=field, pattern=pattern):
                return self.column(field).not_like(pattern, escape=LIKE_ESCAPE)
            case In(field=field, values=values):
                return self.column(field).in_(values)
            case NotIn(field=field, values=values):
                return self.column(field).not_in(values)
        raise ValueError(f"Criteria {criteria!r} is not supported")

    @staticmethod
    def _compare(column: ColumnElement[Any], op: CompareOp, value: Any) -> ColumnElement[bool]:
        match op:
            case CompareOp.GT:
                return column > value
            case CompareOp.GTE:
                return column >= value
            case CompareOp.LT:
                return column < value
            case CompareOp.LTE:
                return column <= value
        raise ValueError(f"Unsupported comparison: {op}")

    def order_by(self, sort: SortSpec) -> list[ColumnElement[Any]]:
        return [
            self.column(d.field).asc() if d.direction is SortDirection.ASC else self.column(d.field).desc()
            for d in sort
        ]


__all__ = ["SqlAlchemyCriteriaCompiler"]
