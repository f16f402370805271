"""Unit tests for sort parsing."""

from __future__ import annotations

import pytest

from listquery.application.sorting import SortDirection, SortDirective, SortParser, SortSpec
from listquery.kernel.errors import InvalidSortDirection, InvalidSortField
from listquery.kernel.schema import FieldKind, FieldSchema, FieldSpec

FIELDS = {
    "id": FieldSpec(FieldKind.NUMBER, sortable=True),
    "email": FieldSpec(FieldKind.STRING, sortable=True),
    "createdAt": FieldSpec(FieldKind.DATE, sortable=True),
    "status": FieldSpec(FieldKind.ENUM, enum_values=("ENABLED",)),
}
SCHEMA = FieldSchema("subscriber", FIELDS)


def _spec(*pairs: tuple[str, SortDirection]) -> SortSpec:
    return SortSpec(tuple(SortDirective(f, d) for f, d in pairs))


ASC, DESC = SortDirection.ASC, SortDirection.DESC


class TestSortSpec:
    def test_requires_directive(self) -> None:
        with pytest.raises(ValueError):
            SortSpec(())

    def test_signature(self) -> None:
        spec = _spec(("createdAt", DESC), ("id", DESC))
        assert spec.signature == "createdAt:DESC,id:DESC"
        assert str(spec) == spec.signature

    def test_reversed(self) -> None:
        spec = _spec(("email", ASC), ("id", DESC))
        assert spec.reversed() == _spec(("email", DESC), ("id", ASC))

    def test_accessors(self) -> None:
        spec = _spec(("email", ASC), ("id", ASC))
        assert spec.primary.field == "email"
        assert spec.tie_breaker.field == "id"
        assert spec.fields == ("email", "id")
        assert len(spec) == 2


class TestSortParser:
    def test_tie_breaker_follows_last_direction(self) -> None:
        assert SortParser(SCHEMA).parse(["asc:email"]) == _spec(("email", ASC), ("id", ASC))

    def test_caller_order_preserved(self) -> None:
        spec = SortParser(SCHEMA).parse(["desc:createdAt", "asc:email"])
        assert spec == _spec(("createdAt", DESC), ("email", ASC), ("id", ASC))

    def test_empty_defaults_to_tie_breaker_desc(self) -> None:
        assert SortParser(SCHEMA).parse([]) == _spec(("id", DESC))
        assert SortParser(SCHEMA).parse(None) == _spec(("id", DESC))

    def test_schema_default_sort(self) -> None:
        schema = FieldSchema("subscriber", FIELDS, default_sort=("desc:createdAt",))
        assert SortParser(schema).parse(None) == _spec(("createdAt", DESC), ("id", DESC))

    def test_explicit_tie_breaker_not_duplicated(self) -> None:
        spec = SortParser(SCHEMA).parse(["desc:email", "asc:id"])
        assert spec == _spec(("email", DESC), ("id", ASC))

    def test_keys_after_tie_breaker_dropped(self) -> None:
        spec = SortParser(SCHEMA).parse(["asc:id", "desc:email"])
        assert spec == _spec(("id", ASC))
        assert spec.tie_breaker.field == "id"

    def test_keys_after_tie_breaker_still_validated(self) -> None:
        with pytest.raises(InvalidSortField):
            SortParser(SCHEMA).parse(["asc:id", "desc:status"])

    def test_comma_separated_tokens(self) -> None:
        spec = SortParser(SCHEMA).parse("desc:createdAt, asc:email")
        assert spec.fields == ("createdAt", "email", "id")

    def test_direction_case_insensitive(self) -> None:
        assert SortParser(SCHEMA).parse(["DESC:email"]).primary.direction is DESC


class TestSortParserErrors:
    def test_unknown_field(self) -> None:
        with pytest.raises(InvalidSortField) as exc_info:
            SortParser(SCHEMA).parse(["asc:secretColumn"])
        assert exc_info.value.field == "secretColumn"

    def test_non_sortable_field(self) -> None:
        with pytest.raises(InvalidSortField):
            SortParser(SCHEMA).parse(["asc:status"])

    def test_repeated_field(self) -> None:
        with pytest.raises(InvalidSortField):
            SortParser(SCHEMA).parse(["asc:email", "desc:email"])

    def test_unknown_direction(self) -> None:
        with pytest.raises(InvalidSortDirection):
            SortParser(SCHEMA).parse(["sideways:email"])

    @pytest.mark.parametrize("token", ["email", "asc:"])
    def test_malformed_token(self, token: str) -> None:
        with pytest.raises(InvalidSortDirection):
            SortParser(SCHEMA).parse([token])
