"""Kernel – framework-agnostic building blocks of the query engine."""

from listquery.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidCursor,
    InvalidFilterField,
    InvalidFilterOperator,
    InvalidFilterValue,
    InvalidPageRequest,
    InvalidPageSize,
    InvalidSortDirection,
    InvalidSortField,
    MissingScope,
    QueryValidationError,
    SchemaDefinitionError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidCursor",
    "InvalidFilterField",
    "InvalidFilterOperator",
    "InvalidFilterValue",
    "InvalidPageRequest",
    "InvalidPageSize",
    "InvalidSortDirection",
    "InvalidSortField",
    "MissingScope",
    "QueryValidationError",
    "SchemaDefinitionError",
    "ValidationError",
]
