"""Criteria – immutable predicate tree over named fields.

The hierarchy is closed: every variant lives in this module so that
translators (in-memory evaluation, SQLAlchemy compilation) can match
exhaustively.

Example::

    criteria = and_(Equals("workspaceId", "W1"), Equals("status", "ENABLED"))
    str(criteria)  # '(workspaceId = W1 AND status = ENABLED)'
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Iterable, Iterator

from listquery.kernel.criteria.operators import CompareOp


class Criteria(abc.ABC):
    """Base of the closed Criteria variant."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Criteria is a closed hierarchy; new variants cannot be added")

    @property
    def is_empty(self) -> bool:
        return False

    def normalize(self) -> "Criteria":
        """Return an equivalent tree with empty groups collapsed."""
        return self

    def walk(self) -> Iterator["Criteria"]:
        """Yield this node and every descendant, depth first."""
        yield self

    def fields(self) -> Iterator[str]:
        """Yield the field name of every leaf, in tree order."""
        for node in self.walk():
            field = getattr(node, "field", None)
            if field is not None:
                yield field

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "Criteria") -> "Criteria":
        return and_(self, other)

    def __or__(self, other: "Criteria") -> "Criteria":
        return or_(self, other)


@dataclasses.dataclass(frozen=True, slots=True)
class Empty(Criteria):
    """Matches everything; the neutral element of composition."""

    @property
    def is_empty(self) -> bool:
        return True

    def __str__(self) -> str:
        return "()"


EMPTY = Empty()


@dataclasses.dataclass(frozen=True, slots=True)
class Equals(Criteria):
    field: str
    value: Any

    def __str__(self) -> str:
        return f"{self.field} = {self.value}"


@dataclasses.dataclass(frozen=True, slots=True)
class NotEquals(Criteria):
    field: str
    value: Any

    def __str__(self) -> str:
        return f"{self.field} != {self.value}"


@dataclasses.dataclass(frozen=True, slots=True)
class Compare(Criteria):
    """Ordering comparison ``field <op> value``."""

    field: str
    op: CompareOp
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", CompareOp(self.op))

    def __str__(self) -> str:
        return f"{self.field} {self.op.symbol} {self.value}"


@dataclasses.dataclass(frozen=True, slots=True)
class Like(Criteria):
    """Partial match with ``%``/``_`` wildcards; ``ignore_case`` selects ILIKE."""

    field: str
    pattern: str
    ignore_case: bool = False

    def __str__(self) -> str:
        keyword = "ILIKE" if self.ignore_case else "LIKE"
        return f"{self.field} {keyword} {self.pattern}"


@dataclasses.dataclass(frozen=True, slots=True)
class NotLike(Criteria):
    field: str
    pattern: str

    def __str__(self) -> str:
        return f"{self.field} NOT LIKE {self.pattern}"


@dataclasses.dataclass(frozen=True, slots=True)
class In(Criteria):
    field: str
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def __str__(self) -> str:
        return f"{self.field} IN [{_join_values(self.values)}]"


@dataclasses.dataclass(frozen=True, slots=True)
class NotIn(Criteria):
    field: str
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def __str__(self) -> str:
        return f"{self.field} NOT IN [{_join_values(self.values)}]"


@dataclasses.dataclass(frozen=True, slots=True)
class And(Criteria):
    """Conjunction; build through :func:`and_` to get a normalised tree."""

    children: tuple[Criteria, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def normalize(self) -> Criteria:
        return _group(And, self.children)

    def walk(self) -> Iterator[Criteria]:
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        return "(" + " AND ".join(str(c) for c in self.children) + ")"


@dataclasses.dataclass(frozen=True, slots=True)
class Or(Criteria):
    """Disjunction; build through :func:`or_` to get a normalised tree."""

    children: tuple[Criteria, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def normalize(self) -> Criteria:
        return _group(Or, self.children)

    def walk(self) -> Iterator[Criteria]:
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        return "(" + " OR ".join(str(c) for c in self.children) + ")"


def _join_values(values: Iterable[Any]) -> str:
    return ", ".join("null" if v is None else str(v) for v in values)


def _group(kind: type[And] | type[Or], children: Iterable[Criteria]) -> Criteria:
    # Empty operands are dropped and same-kind groups are flattened.
    flat: list[Criteria] = []
    for child in children:
        node = child.normalize()
        if node.is_empty:
            continue
        if isinstance(node, kind):
            flat.extend(node.children)
        else:
            flat.append(node)
    if not flat:
        return EMPTY
    if len(flat) == 1:
        return flat[0]
    return kind(tuple(flat))


def and_(*children: Criteria) -> Criteria:
    """Conjunction of *children*, normalised (``Empty`` when nothing remains)."""
    return _group(And, children)


def or_(*children: Criteria) -> Criteria:
    """Disjunction of *children*, normalised (``Empty`` when nothing remains)."""
    return _group(Or, children)


CRITERIA_TYPES: tuple[type[Criteria], ...] = (
    Empty,
    Equals,
    NotEquals,
    Compare,
    Like,
    NotLike,
    In,
    NotIn,
    And,
    Or,
)


__all__ = [
    "And",
    "CRITERIA_TYPES",
    "Compare",
    "Criteria",
    "EMPTY",
    "Empty",
    "Equals",
    "In",
    "Like",
    "NotEquals",
    "NotIn",
    "NotLike",
    "Or",
    "and_",
    "or_",
]
