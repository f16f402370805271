"""Application listing – end-to-end list query service."""
from listquery.application.listing.request import ListRequest, PreparedQuery
from listquery.application.listing.service import ListQueryService

__all__ = ["ListQueryService", "ListRequest", "PreparedQuery"]
