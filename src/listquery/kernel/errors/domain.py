"""Domain errors – rejected input and violated invariants."""

from __future__ import annotations

from typing import Any

from listquery.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query rule is violated."""

    default_code = "domain_error"
    status_code = 422


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` lists the field-level failures, one mapping per offending
    field with at least a ``field`` key. Errors about a single field fill it
    from their ``detail`` when none is given.
    """

    default_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        if errors is None:
            errors = [dict(self.detail)] if "field" in self.detail else []
        self.errors: list[dict[str, Any]] = errors

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
