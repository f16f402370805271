"""Unit tests for the Criteria tree."""

from __future__ import annotations

import pytest

from listquery.kernel.criteria import (
    CRITERIA_TYPES,
    EMPTY,
    And,
    Compare,
    CompareOp,
    Criteria,
    Empty,
    Equals,
    FilterOperator,
    In,
    Like,
    NotEquals,
    NotIn,
    NotLike,
    Or,
    and_,
    contains_pattern,
    escape_like,
    or_,
)

A = Equals("a", 1)
B = Equals("b", 2)
C = Equals("c", 3)


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


class TestAndOr:
    def test_and_of_nothing_is_empty(self) -> None:
        assert and_() == EMPTY
        assert and_(EMPTY, EMPTY).is_empty

    def test_or_of_nothing_is_empty(self) -> None:
        assert or_() == EMPTY

    def test_empty_operands_dropped(self) -> None:
        assert and_(EMPTY, A, EMPTY, B) == And((A, B))
        assert or_(A, EMPTY) == A

    def test_single_child_unwrapped(self) -> None:
        assert and_(A) == A
        assert or_(A) == A

    def test_nested_same_kind_flattened(self) -> None:
        assert and_(and_(A, B), C) == And((A, B, C))
        assert or_(A, or_(B, C)) == Or((A, B, C))

    def test_mixed_kind_kept_nested(self) -> None:
        tree = and_(A, or_(B, C))
        assert tree == And((A, Or((B, C))))

    def test_operand_order_is_stable(self) -> None:
        assert and_(C, A, B).children == (C, A, B)

    def test_normalize_collapses_hand_built_groups(self) -> None:
        raw = And((EMPTY, And((A,)), Or(())))
        assert raw.normalize() == A

    def test_operator_overloads(self) -> None:
        assert (A & B) == And((A, B))
        assert (A | B) == Or((A, B))
        assert (A & EMPTY) == A

    def test_equal_trees_compare_equal(self) -> None:
        assert and_(A, or_(B, C)) == and_(Equals("a", 1), or_(Equals("b", 2), Equals("c", 3)))
        assert hash(and_(A, B)) == hash(and_(A, B))


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class TestLeaves:
    def test_compare_accepts_operator_name(self) -> None:
        node = Compare("age", "gte", 18)
        assert node.op is CompareOp.GTE

    def test_compare_rejects_unknown_operator(self) -> None:
        with pytest.raises(ValueError):
            Compare("age", "between", 18)

    def test_in_values_become_tuple(self) -> None:
        assert In("status", ["A", "B"]).values == ("A", "B")
        assert NotIn("status", ["A"]).values == ("A",)

    def test_nodes_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            A.value = 5  # type: ignore[misc]

    def test_fields_walks_tree(self) -> None:
        tree = and_(A, or_(Like("email", "%x%"), NotIn("c", (1,))))
        assert list(tree.fields()) == ["a", "email", "c"]

    def test_walk_yields_groups_and_leaves(self) -> None:
        tree = and_(A, or_(B, C))
        kinds = [type(n).__name__ for n in tree.walk()]
        assert kinds == ["And", "Equals", "Or", "Equals", "Equals"]


# ---------------------------------------------------------------------------
# Text form
# ---------------------------------------------------------------------------


class TestRendering:
    def test_empty(self) -> None:
        assert str(EMPTY) == "()"

    def test_and(self) -> None:
        tree = and_(Equals("workspaceId", "W1"), Equals("status", "ENABLED"))
        assert str(tree) == "(workspaceId = W1 AND status = ENABLED)"

    def test_like_variants(self) -> None:
        assert str(Like("email", "%john%", ignore_case=True)) == "email ILIKE %john%"
        assert str(Like("email", "j%")) == "email LIKE j%"
        assert str(NotLike("email", "j%")) == "email NOT LIKE j%"

    def test_comparisons(self) -> None:
        assert str(NotEquals("a", 1)) == "a != 1"
        assert str(Compare("a", CompareOp.LT, 1)) == "a < 1"

    def test_in(self) -> None:
        assert str(In("status", ("A", None))) == "status IN [A, null]"
        assert str(NotIn("status", ("A",))) == "status NOT IN [A]"

    def test_nested(self) -> None:
        tree = and_(A, or_(B, C))
        assert str(tree) == "(a = 1 AND (b = 2 OR c = 3))"


# ---------------------------------------------------------------------------
# Closed hierarchy
# ---------------------------------------------------------------------------


class TestClosedHierarchy:
    def test_subclassing_outside_module_rejected(self) -> None:
        with pytest.raises(TypeError):

            class Custom(Criteria):  # noqa: F841
                pass

    def test_variant_listing(self) -> None:
        assert set(CRITERIA_TYPES) == {Empty, Equals, NotEquals, Compare, Like, NotLike, In, NotIn, And, Or}


# ---------------------------------------------------------------------------
# Operators and patterns
# ---------------------------------------------------------------------------


class TestFilterOperator:
    @pytest.mark.parametrize("token", ["eq", "EQ", " ilk "])
    def test_parse_known(self, token: str) -> None:
        assert FilterOperator.parse(token) is not None

    def test_parse_unknown(self) -> None:
        assert FilterOperator.parse("between") is None

    def test_flags(self) -> None:
        assert FilterOperator.ILK.is_like
        assert FilterOperator.NIN.is_multi_value
        assert FilterOperator.GTE.is_ordering
        assert not FilterOperator.EQ.is_ordering

    def test_compare_op(self) -> None:
        assert FilterOperator.LTE.compare_op is CompareOp.LTE
        with pytest.raises(ValueError):
            _ = FilterOperator.EQ.compare_op

    def test_symbols(self) -> None:
        assert [op.symbol for op in CompareOp] == [">", ">=", "<", "<="]


class TestPatterns:
    def test_escape_wildcards(self) -> None:
        assert escape_like("50%_off\\") == "50\\%\\_off\\\\"

    def test_contains_pattern(self) -> None:
        assert contains_pattern("john") == "%john%"
        assert contains_pattern("a_b") == "%a\\_b%"
