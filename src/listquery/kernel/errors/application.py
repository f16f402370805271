"""Application-layer errors – misuse of the engine by its caller."""

from __future__ import annotations

from listquery.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class MissingScope(ApplicationError):
    """A query was composed without its mandatory scope constraint.

    This is a programming error in the caller, never a user input error.
    """

    default_code = "missing_scope"

    def __init__(self, message: str = "A scope constraint is required for every query") -> None:
        super().__init__(message)


class SchemaDefinitionError(ApplicationError):
    """A field schema is inconsistent (raised once, when the schema is declared)."""

    default_code = "schema_definition_error"

    def __init__(self, entity: str, reason: str) -> None:
        super().__init__(f"Invalid field schema for '{entity}': {reason}", detail={"entity": entity})
        self.entity = entity
        self.reason = reason


__all__ = ["ApplicationError", "MissingScope", "SchemaDefinitionError"]
