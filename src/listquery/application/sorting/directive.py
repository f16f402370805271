"""Application sorting – SortDirection, SortDirective, SortSpec."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterator


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, token: str) -> "SortDirection | None":
        try:
            return cls(token.strip().upper())
        except ValueError:
            return None

    def reversed(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class SortDirective:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC

    def __str__(self) -> str:
        return f"{self.field}:{self.direction.value}"


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Validated, ordered sort whose last directive is the unique tie-breaker."""

    directives: tuple[SortDirective, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "directives", tuple(self.directives))
        if not self.directives:
            raise ValueError("SortSpec requires at least one directive")

    def __iter__(self) -> Iterator[SortDirective]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self.directives)

    def __str__(self) -> str:
        return self.signature

    @property
    def primary(self) -> SortDirective:
        return self.directives[0]

    @property
    def tie_breaker(self) -> SortDirective:
        return self.directives[-1]

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(d.field for d in self.directives)

    @property
    def signature(self) -> str:
        """Stable text form, e.g. ``createdAt:DESC,id:DESC``."""
        return ",".join(str(d) for d in self.directives)

    def reversed(self) -> "SortSpec":
        """The same keys with every direction flipped."""
        return SortSpec(tuple(SortDirective(d.field, d.direction.reversed()) for d in self.directives))


__all__ = ["SortDirection", "SortDirective", "SortSpec"]
