"""Field schema – the allow-list of queryable and sortable fields of an entity.

A :class:`FieldSchema` is declared once per entity type when the service is
composed and is read-only afterwards, so it can be shared by every request.

Example::

    SUBSCRIBERS = FieldSchema(
        entity="subscriber",
        fields={
            "id": FieldSpec(FieldKind.UUID, sortable=True),
            "workspaceId": FieldSpec(FieldKind.UUID),
            "email": FieldSpec(FieldKind.STRING, sortable=True, searchable=True),
            "status": FieldSpec(FieldKind.ENUM, enum_values=("ENABLED", "DISABLED")),
            "createdAt": FieldSpec(FieldKind.DATE, sortable=True),
        },
        tie_breaker="id",
        default_sort=("desc:createdAt",),
    )
"""
from __future__ import annotations

import dataclasses
import types
from typing import Any, Iterator, Mapping

from listquery.kernel.criteria.nodes import Compare, Criteria, Equals, In, Like, NotEquals, NotIn, NotLike
from listquery.kernel.criteria.operators import FilterOperator
from listquery.kernel.errors import InvalidFilterField, InvalidFilterValue, SchemaDefinitionError
from listquery.kernel.schema.kinds import FieldKind

SORT_DIRECTIONS = frozenset({"ASC", "DESC"})


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """Declaration of a single field.

    ``allowed_operators`` defaults to the operators that make sense for the
    kind; pass an empty set to make a field sortable but not filterable.
    A ``nullable`` field may hold ``None`` in stored rows; such a field can be
    filtered but never sorted, because keyset cursors need a value for every
    sort key.
    """

    kind: FieldKind
    allowed_operators: frozenset[FilterOperator] | None = None
    sortable: bool = False
    searchable: bool = False
    enum_values: tuple[str, ...] = ()
    nullable: bool = False

    def __post_init__(self) -> None:
        ops = self.kind.default_operators if self.allowed_operators is None else self.allowed_operators
        object.__setattr__(self, "allowed_operators", frozenset(FilterOperator(o) for o in ops))
        object.__setattr__(self, "enum_values", tuple(self.enum_values))

    def allows(self, operator: FilterOperator) -> bool:
        return operator in (self.allowed_operators or frozenset())

    def coerce(self, raw: Any) -> Any:
        return self.kind.coerce(raw, self.enum_values)

    def accepts(self, value: Any) -> bool:
        return self.kind.accepts(value, self.enum_values)


@dataclasses.dataclass(frozen=True, eq=False)
class FieldSchema:
    """Immutable field allow-list for one entity type."""

    entity: str
    fields: Mapping[str, FieldSpec]
    tie_breaker: str = "id"
    default_sort: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", types.MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "default_sort", tuple(self.default_sort))
        self._check()

    def _check(self) -> None:
        if not self.entity:
            raise SchemaDefinitionError("<unnamed>", "entity name is required")
        for name, spec in self.fields.items():
            if not name:
                raise SchemaDefinitionError(self.entity, "field names must be non-empty")
            like_ops = [op.value for op in spec.allowed_operators or () if op.is_like]
            if like_ops and spec.kind is not FieldKind.STRING:
                raise SchemaDefinitionError(
                    self.entity, f"'{name}' is {spec.kind.value} but allows {', '.join(sorted(like_ops))}"
                )
            if spec.searchable and spec.kind is not FieldKind.STRING:
                raise SchemaDefinitionError(self.entity, f"searchable field '{name}' must be a string")
            if spec.kind is FieldKind.ENUM and not spec.enum_values:
                raise SchemaDefinitionError(self.entity, f"enum field '{name}' declares no values")
            if spec.sortable and spec.nullable:
                raise SchemaDefinitionError(self.entity, f"sortable field '{name}' cannot be nullable")
        tie = self.fields.get(self.tie_breaker)
        if tie is None or not tie.sortable:
            raise SchemaDefinitionError(
                self.entity, f"tie-breaker '{self.tie_breaker}' must be a declared sortable field"
            )
        for token in self.default_sort:
            direction, sep, field = token.partition(":")
            if not sep or direction.strip().upper() not in SORT_DIRECTIONS:
                raise SchemaDefinitionError(self.entity, f"default sort '{token}' has no asc or desc direction")
            spec = self.fields.get(field.strip())
            if spec is None or not spec.sortable:
                raise SchemaDefinitionError(self.entity, f"default sort '{token}' names no sortable field")

    # Lookups ----------------------------------------------------------
    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def get(self, name: str) -> FieldSpec | None:
        return self.fields.get(name)

    @property
    def sortable_fields(self) -> tuple[str, ...]:
        return tuple(n for n, s in self.fields.items() if s.sortable)

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return tuple(n for n, s in self.fields.items() if s.searchable)

    def coerce(self, field: str, raw: Any) -> Any:
        """Convert *raw* into the kind of *field*.

        Raises :class:`InvalidFilterField` or :class:`InvalidFilterValue`.
        """
        spec = self.fields.get(field)
        if spec is None:
            raise InvalidFilterField(field)
        try:
            return spec.coerce(raw)
        except ValueError as exc:
            raise InvalidFilterValue(field, raw, str(exc)) from exc

    def validate_criteria(self, criteria: Criteria) -> Criteria:
        """Check every leaf of *criteria* against the schema and return it.

        Values must already be typed; this never converts.
        """
        for node in criteria.walk():
            match node:
                case Equals(field=f, value=v) | NotEquals(field=f, value=v) | Compare(field=f, value=v):
                    self._check_value(f, v)
                case In(field=f, values=vs) | NotIn(field=f, values=vs):
                    for v in vs:
                        self._check_value(f, v)
                case Like(field=f, pattern=p) | NotLike(field=f, pattern=p):
                    self._check_value(f, p, like=True)
        return criteria

    def _check_value(self, field: str, value: Any, *, like: bool = False) -> None:
        spec = self.fields.get(field)
        if spec is None:
            raise InvalidFilterField(field)
        if like:
            if spec.kind is not FieldKind.STRING or not isinstance(value, str):
                raise InvalidFilterValue(field, value, "LIKE requires a string field and pattern")
        elif not spec.accepts(value):
            raise InvalidFilterValue(field, value, f"expected {spec.kind.value}")


__all__ = ["FieldSchema", "FieldSpec"]
