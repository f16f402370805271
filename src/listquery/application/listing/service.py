"""Application listing – ListQueryService.

Wires the pipeline for one entity::

    filters ─► FilterParser ──┐
    search  ─► SearchCompiler ┼─► CriteriaComposer ─► PageAssembler ─► page
    scope   ──────────────────┘         sort/cursor ──┘
"""
from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from listquery.application.composition import CriteriaComposer, scope_equals
from listquery.application.filtering import FilterParser
from listquery.application.listing.request import ListRequest, PreparedQuery
from listquery.application.pagination import CursorCodec, CursorPage, OffsetPage, PageAssembler, RowStore
from listquery.application.search import SearchCompiler
from listquery.application.sorting import SortParser
from listquery.config.settings import QuerySettings
from listquery.kernel.criteria import Criteria
from listquery.kernel.errors import InvalidPageRequest
from listquery.kernel.schema import FieldSchema
from listquery.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class ListQueryService(Generic[T]):
    """List rows of one entity, always restricted to the caller's scope.

    ``scope_field`` names the tenant column (e.g. ``workspaceId``); its value
    comes from the authenticated request, never from the client payload.
    Without *settings* the service reads them with :meth:`QuerySettings.from_env`.
    """

    def __init__(
        self,
        schema: FieldSchema,
        store: RowStore[T],
        settings: QuerySettings | None = None,
        *,
        scope_field: str,
        search_fields: Sequence[str] | None = None,
    ) -> None:
        settings = settings if settings is not None else QuerySettings.from_env()
        self._schema = schema
        self._settings = settings
        self._scope_field = scope_field
        self._filters = FilterParser(schema)
        self._search = SearchCompiler(schema, search_fields)
        self._composer = CriteriaComposer()
        self._sorts = SortParser(schema)
        self._codec = CursorCodec.from_settings(settings, schema)
        self._assembler: PageAssembler[T] = PageAssembler(
            store, self._codec, max_page_size=settings.max_page_size
        )

    @property
    def codec(self) -> CursorCodec:
        return self._codec

    def prepare(self, request: ListRequest, scope: Any) -> PreparedQuery:
        """Validate *request* and build the query; never touches the store."""
        if request.page is not None and request.cursor:
            raise InvalidPageRequest("Use either 'page' or 'cursor', not both")
        scope_criteria = scope if isinstance(scope, Criteria) else scope_equals(self._scope_field, scope)
        criteria = self._composer.compose(
            scope_criteria,
            self._filters.parse(request.filters, request.combinators),
            self._search.compile(request.search),
        )
        sort = self._sorts.parse(request.sort)
        size = self._settings.default_page_size if request.size is None else request.size
        self._assembler.check_size(size)
        position = self._codec.decode(request.cursor, sort) if request.cursor else None
        return PreparedQuery(criteria=criteria, sort=sort, size=size, position=position, page=request.page)

    async def list(self, request: ListRequest, scope: Any) -> CursorPage[T] | OffsetPage[T]:
        prepared = self.prepare(request, scope)
        logger.debug(
            "list_query",
            entity=self._schema.entity,
            criteria=str(prepared.criteria),
            sort=prepared.sort.signature,
            size=prepared.size,
            page=prepared.page,
            resumed=prepared.position is not None,
        )
        if prepared.page is not None:
            return await self._assembler.fetch_offset_page(
                prepared.criteria, prepared.sort, prepared.page, prepared.size
            )
        return await self._assembler.fetch_page(
            prepared.criteria, prepared.sort, prepared.size, prepared.position
        )


__all__ = ["ListQueryService"]
