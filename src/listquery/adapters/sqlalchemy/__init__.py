"""SQLAlchemy adapter – Criteria compilation and a RowStore over SQLAlchemy Core."""
from listquery.adapters.sqlalchemy.criteria import SqlAlchemyCriteriaCompiler
from listquery.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from listquery.adapters.sqlalchemy.store import SqlAlchemyRowStore

__all__ = ["SqlAlchemyCriteriaCompiler", "SqlAlchemyRowStore", "SqlAlchemySessionFactory"]
