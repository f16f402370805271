"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                (domain.py)
    │   └── ValidationError
    │       └── QueryValidationError   (query.py)
    │           ├── InvalidFilterField
    │           ├── InvalidFilterOperator
    │           ├── InvalidFilterValue
    │           ├── InvalidSortField
    │           ├── InvalidSortDirection
    │           ├── InvalidCursor
    │           ├── InvalidPageSize
    │           └── InvalidPageRequest
    └── ApplicationError           (application.py)
        ├── MissingScope
        └── SchemaDefinitionError
"""

from listquery.kernel.errors.application import ApplicationError, MissingScope, SchemaDefinitionError
from listquery.kernel.errors.base import BaseError
from listquery.kernel.errors.domain import DomainError, ValidationError
from listquery.kernel.errors.query import (
    InvalidCursor,
    InvalidFilterField,
    InvalidFilterOperator,
    InvalidFilterValue,
    InvalidPageRequest,
    InvalidPageSize,
    InvalidSortDirection,
    InvalidSortField,
    QueryValidationError,
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
