"""Unit tests for the keyset page query builder."""

from __future__ import annotations

import pytest

from cardgraph.core.pagination import (
    EqualityFilter,
    InvalidFilterError,
    InvalidPageSizeError,
    PageQueryBuilder,
)
from cardgraph.features.cards import Card


@pytest.fixture
def builder() -> PageQueryBuilder:
    return PageQueryBuilder(Card, Card.card_id, {"name": Card.card_name})


def compile_statement(statement):
    compiled = statement.compile()
    return str(compiled), list(compiled.params.values())


class TestPageQueryBuilder:
    """Tests for PageQueryBuilder.build."""

    def test_first_page_has_no_conditions(self, builder):
        sql, params = compile_statement(builder.build(limit=3))

        assert "WHERE" not in sql
        assert 'ORDER BY "Card"."CardID" ASC' in sql
        assert "LIMIT" in sql
        assert params == [3]

    def test_after_key_is_an_exclusive_lower_bound(self, builder):
        sql, params = compile_statement(builder.build(limit=3, after_key=7))

        assert '"Card"."CardID" >' in sql
        assert '"Card"."CardID" >=' not in sql
        assert 7 in params

    def test_filter_adds_equality_condition(self, builder):
        statement = builder.build(
            limit=5,
            filter=EqualityFilter(field="name", value="Coalition Victory"),
        )
        sql, params = compile_statement(statement)

        assert '"Card"."CardName" =' in sql
        assert "Coalition Victory" in params
        # Value travels as a bound parameter, never inlined
        assert "Coalition Victory" not in sql

    def test_conditions_combine(self, builder):
        statement = builder.build(
            limit=2,
            after_key=1,
            filter=EqualityFilter(field="name", value="Counterspell"),
        )
        sql, params = compile_statement(statement)

        assert " AND " in sql
        assert sorted(params, key=str) == sorted([1, "Counterspell", 2], key=str)

    def test_lookahead_fetches_one_extra_row(self, builder):
        _, params = compile_statement(builder.build(limit=3, lookahead=True))

        assert params == [4]

    @pytest.mark.parametrize("limit", [0, -1, True, 2.5])
    def test_rejects_invalid_limit(self, builder, limit):
        with pytest.raises(InvalidPageSizeError):
            builder.build(limit=limit)

    def test_rejects_unknown_filter_field(self, builder):
        with pytest.raises(InvalidFilterError) as exc_info:
            builder.build(limit=3, filter=EqualityFilter(field="color", value="red"))

        assert exc_info.value.code == "INVALID_FILTER"
        assert exc_info.value.field == "color"
        assert exc_info.value.allowed == ["name"]

    def test_key_cannot_be_filterable(self):
        with pytest.raises(ValueError, match="ordering key"):
            PageQueryBuilder(Card, Card.card_id, {"id": Card.card_id})
