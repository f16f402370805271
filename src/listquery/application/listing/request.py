"""Application listing – ListRequest and PreparedQuery."""
from __future__ import annotations

import dataclasses
from typing import Mapping, Sequence

from listquery.application.filtering import Combinator
from listquery.application.pagination import CursorPosition
from listquery.application.sorting import SortSpec
from listquery.kernel.criteria import Criteria


@dataclasses.dataclass(frozen=True)
class ListRequest:
    """Raw list parameters as received from the transport layer.

    ``page`` selects offset mode; without it the request is keyset-paginated
    and ``cursor`` resumes from a previous page.
    """

    filters: Mapping[str, Sequence[str] | str] = dataclasses.field(default_factory=dict)
    combinators: Mapping[str, Combinator | str] = dataclasses.field(default_factory=dict)
    search: str | None = None
    sort: Sequence[str] | str | None = None
    size: int | None = None
    cursor: str | None = None
    page: int | None = None


@dataclasses.dataclass(frozen=True)
class PreparedQuery:
    """A fully validated query, ready for a single store round trip."""

    criteria: Criteria
    sort: SortSpec
    size: int
    position: CursorPosition | None = None
    page: int | None = None

    @property
    def is_offset(self) -> bool:
        return self.page is not None


__all__ = ["ListRequest", "PreparedQuery"]
