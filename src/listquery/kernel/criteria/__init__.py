"""Kernel criteria – immutable predicate tree, operators and evaluation."""
from listquery.kernel.criteria.evaluation import matches, read_field
from listquery.kernel.criteria.nodes import (
    CRITERIA_TYPES,
    EMPTY,
    And,
    Compare,
    Criteria,
    Empty,
    Equals,
    In,
    Like,
    NotEquals,
    NotIn,
    NotLike,
    Or,
    and_,
    or_,
)
from listquery.kernel.criteria.operators import CompareOp, FilterOperator
from listquery.kernel.criteria.patterns import LIKE_ESCAPE, contains_pattern, escape_like, like_to_regex

__all__ = [
    "And",
    "CRITERIA_TYPES",
    "Compare",
    "CompareOp",
    "Criteria",
    "EMPTY",
    "Empty",
    "Equals",
    "FilterOperator",
    "In",
    "LIKE_ESCAPE",
    "Like",
    "NotEquals",
    "NotIn",
    "NotLike",
    "Or",
    "and_",
    "contains_pattern",
    "escape_like",
    "like_to_regex",
    "matches",
    "or_",
    "read_field",
]
