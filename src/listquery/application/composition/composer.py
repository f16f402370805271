"""Application composition – CriteriaComposer."""
from __future__ import annotations

from typing import Any

from listquery.kernel.criteria import EMPTY, Criteria, Equals, and_
from listquery.kernel.errors import MissingScope
from listquery.kernel.schema import FieldSchema


def scope_equals(field: str, value: Any) -> Criteria:
    """Scope constraint restricting rows to one tenant, e.g. ``workspaceId = W1``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingScope(f"Scope value for '{field}' is missing")
    return Equals(field, value)


class CriteriaComposer:
    """Merge scope, filter and search criteria into the final query tree.

    The result is ``And(scope, filters, search)`` in that order, with empty
    operands dropped. When a *schema* is given the merged tree is checked
    against it as well.
    """

    def __init__(self, schema: FieldSchema | None = None) -> None:
        self._schema = schema

    def compose(
        self,
        scope: Criteria | None,
        filter_criteria: Criteria = EMPTY,
        search_criteria: Criteria = EMPTY,
    ) -> Criteria:
        if scope is None or scope.normalize().is_empty:
            raise MissingScope()
        criteria = and_(scope, filter_criteria, search_criteria)
        if self._schema is not None:
            self._schema.validate_criteria(criteria)
        return criteria


__all__ = ["CriteriaComposer", "scope_equals"]
