"""Application pagination – keyset predicate.

For a sort ``k1, k2, ..., kn`` and a position ``v1, ..., vn`` the rows
strictly after the position are::

    k1 > v1
    OR (k1 = v1 AND k2 > v2)
    ...
    OR (k1 = v1 AND ... AND k(n-1) = v(n-1) AND kn > vn)

with ``<`` in place of ``>`` for descending keys. Because the last key is
unique this is a strict total order, so no row is skipped or repeated.
"""
from __future__ import annotations

from typing import Any, Sequence

from listquery.application.sorting import SortDirection, SortSpec
from listquery.kernel.criteria import Compare, CompareOp, Criteria, Equals, and_, or_


def keyset_criteria(sort: SortSpec, values: Sequence[Any]) -> Criteria:
    """Criteria selecting rows that come strictly after *values* under *sort*."""
    if len(values) != len(sort):
        raise ValueError(f"Expected {len(sort)} key values, got {len(values)}")
    branches: list[Criteria] = []
    prefix: list[Criteria] = []
    for directive, value in zip(sort, values):
        op = CompareOp.GT if directive.direction is SortDirection.ASC else CompareOp.LT
        branches.append(and_(*prefix, Compare(directive.field, op, value)))
        prefix.append(Equals(directive.field, value))
    return or_(*branches)


__all__ = ["keyset_criteria"]
