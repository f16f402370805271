"""Query errors – invalid filters, sorts, cursors and page requests.

Every error here is raised while the request is being parsed, before the
store is touched, and maps to a "bad request" at the transport boundary.
"""

from __future__ import annotations

from typing import Any

from listquery.kernel.errors.domain import ValidationError


class QueryValidationError(ValidationError):
    """Base class for rejected list query input."""

    default_code = "invalid_query"


class InvalidFilterField(QueryValidationError):
    """The filter names a field that is not in the schema."""

    default_code = "invalid_filter_field"

    def __init__(self, field: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Unknown filter field '{field}'",
            detail={"field": field},
            **kwargs,
        )
        self.field = field


class InvalidFilterOperator(QueryValidationError):
    """The operator is unknown, malformed, or not allowed for the field."""

    default_code = "invalid_filter_operator"

    def __init__(self, field: str, operator: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Operator '{operator}' is not allowed for field '{field}'",
            detail={"field": field, "operator": operator},
            **kwargs,
        )
        self.field = field
        self.operator = operator


class InvalidFilterValue(QueryValidationError):
    """The filter value cannot be converted to the field's kind."""

    default_code = "invalid_filter_value"

    def __init__(self, field: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid value {value!r} for field '{field}': {reason}",
            detail={"field": field, "value": value, "reason": reason},
            **kwargs,
        )
        self.field = field
        self.value = value
        self.reason = reason


class InvalidSortField(QueryValidationError):
    """The sort names an unknown, non-sortable or repeated field."""

    default_code = "invalid_sort_field"

    def __init__(self, field: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Field '{field}' is not sortable",
            detail={"field": field},
            **kwargs,
        )
        self.field = field


class InvalidSortDirection(QueryValidationError):
    """The sort token has no recognised direction."""

    default_code = "invalid_sort_direction"

    def __init__(self, token: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid sort directive '{token}', expected 'asc:<field>' or 'desc:<field>'",
            detail={"token": token},
            errors=[{"field": "sort", "value": token, "reason": "expected asc or desc"}],
            **kwargs,
        )
        self.token = token


class InvalidCursor(QueryValidationError):
    """The cursor is malformed, tampered with, or bound to another sort."""

    default_code = "invalid_cursor"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid cursor: {reason}",
            detail={"reason": reason},
            errors=[{"field": "cursor", "reason": reason}],
            **kwargs,
        )
        self.reason = reason


class InvalidPageSize(QueryValidationError):
    """The page size is outside ``1..max_page_size``."""

    default_code = "invalid_page_size"

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(
            f"Page size must be between 1 and {max_size}, got {size}",
            detail={"size": size, "max": max_size},
            errors=[{"field": "size", "value": size, "reason": f"must be between 1 and {max_size}"}],
        )
        self.size = size
        self.max_size = max_size


class InvalidPageRequest(QueryValidationError):
    """The page request mixes or misuses pagination modes."""

    default_code = "invalid_page_request"


__all__ = [
    "InvalidCursor",
    "InvalidFilterField",
    "InvalidFilterOperator",
    "InvalidFilterValue",
    "InvalidPageRequest",
    "InvalidPageSize",
    "InvalidSortDirection",
    "InvalidSortField",
    "QueryValidationError",
]
