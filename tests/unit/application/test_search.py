"""Unit tests for free-text search compilation."""

from __future__ import annotations

import pytest

from listquery.application.search import SearchCompiler
from listquery.kernel.criteria import EMPTY, Like, Or, matches
from listquery.kernel.errors import InvalidFilterField
from listquery.kernel.schema import FieldKind, FieldSchema, FieldSpec

SCHEMA = FieldSchema(
    entity="subscriber",
    fields={
        "id": FieldSpec(FieldKind.NUMBER, sortable=True),
        "email": FieldSpec(FieldKind.STRING, searchable=True),
        "firstname": FieldSpec(FieldKind.STRING, searchable=True),
        "lastname": FieldSpec(FieldKind.STRING, searchable=True),
        "notes": FieldSpec(FieldKind.STRING),
    },
)


class TestSearchCompiler:
    def test_term_becomes_or_of_ilike(self) -> None:
        criteria = SearchCompiler(SCHEMA).compile("john")
        assert criteria == Or(
            (
                Like("email", "%john%", ignore_case=True),
                Like("firstname", "%john%", ignore_case=True),
                Like("lastname", "%john%", ignore_case=True),
            )
        )

    @pytest.mark.parametrize("term", [None, "", "   "])
    def test_blank_term_is_empty(self, term: str | None) -> None:
        assert SearchCompiler(SCHEMA).compile(term) == EMPTY

    def test_term_is_trimmed(self) -> None:
        criteria = SearchCompiler(SCHEMA, ["email"]).compile("  john ")
        assert criteria == Like("email", "%john%", ignore_case=True)

    def test_wildcards_in_term_are_literal(self) -> None:
        criteria = SearchCompiler(SCHEMA, ["email"]).compile("50%")
        assert criteria == Like("email", "%50\\%%", ignore_case=True)
        assert matches(criteria, {"email": "save 50% now"})
        assert not matches(criteria, {"email": "save 500 now"})

    def test_non_searchable_fields_never_consulted(self) -> None:
        compiler = SearchCompiler(SCHEMA)
        assert "notes" not in compiler.fields
        assert "notes" not in set(compiler.compile("x").fields())

    def test_subset_must_be_searchable(self) -> None:
        with pytest.raises(InvalidFilterField):
            SearchCompiler(SCHEMA, ["notes"])

    def test_any_field_match_qualifies(self) -> None:
        criteria = SearchCompiler(SCHEMA).compile("JOHN")
        assert matches(criteria, {"email": "x@y.z", "firstname": "Johnny", "lastname": "Doe"})
        assert not matches(criteria, {"email": "x@y.z", "firstname": "Jane", "lastname": "Doe"})
