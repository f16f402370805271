"""
listquery – filtering, search and keyset pagination for list endpoints.

Import path convention::

    from listquery.kernel.criteria import And, Equals
    from listquery.kernel.schema import FieldSchema, FieldSpec, FieldKind
    from listquery.application.listing import ListQueryService, ListRequest
    from listquery.adapters.sqlalchemy import SqlAlchemyRowStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
