"""Tests for the paginatedCards query."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from cardgraph.core.pagination import CursorCodec, StoreError
from cardgraph.features.graphql.context import GraphQLContext
from cardgraph.features.graphql.extensions import MASKED_ERROR_MESSAGE
from tests.graphql.conftest import PAGINATED_CARDS_QUERY

if TYPE_CHECKING:
    from cardgraph.features.graphql.schema import CardSchema


def failing_context(error: Exception) -> GraphQLContext:
    pagination = MagicMock()
    pagination.get_page = AsyncMock(side_effect=error)
    return GraphQLContext(pagination=pagination)


async def test_first_page(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3},
        context_value=graphql_context,
    )

    assert result.errors is None
    page = result.data["paginatedCards"]
    assert page["totalCount"] == 3
    assert page["pageInfo"] == {"lastCursor": CursorCodec.encode(3), "hasNextPage": True}
    assert [edge["node"]["CardID"] for edge in page["edges"]] == ["1", "2", "3"]
    assert page["edges"][0] == {
        "cursor": "MQ==",
        "node": {
            "CardID": "1",
            "CardName": "Coalition Victory",
            "CardFlavorText": "Flavor of Coalition Victory",
            "CardOracleText": None,
        },
    }


async def test_next_page_from_last_cursor(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3, "after": CursorCodec.encode(3)},
        context_value=graphql_context,
    )

    assert result.errors is None
    page = result.data["paginatedCards"]
    assert [edge["node"]["CardID"] for edge in page["edges"]] == ["4", "5"]
    assert page["pageInfo"]["hasNextPage"] is False


async def test_name_filter(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 10, "name": "Coalition Victory"},
        context_value=graphql_context,
    )

    assert result.errors is None
    nodes = [edge["node"] for edge in result.data["paginatedCards"]["edges"]]
    assert [node["CardID"] for node in nodes] == ["1", "3"]
    assert {node["CardName"] for node in nodes} == {"Coalition Victory"}


async def test_no_match_returns_empty_connection(
    schema: CardSchema, graphql_context: GraphQLContext
) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3, "name": "Black Lotus"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["paginatedCards"] == {
        "totalCount": 0,
        "pageInfo": {"lastCursor": None, "hasNextPage": False},
        "edges": [],
    }


async def test_omitted_first_uses_default(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(PAGINATED_CARDS_QUERY, context_value=graphql_context)

    assert result.errors is None
    assert result.data["paginatedCards"]["totalCount"] == 2


async def test_malformed_cursor_error_code(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3, "after": "not-base64!!"},
        context_value=graphql_context,
    )

    assert result.data == {"paginatedCards": None}
    assert len(result.errors) == 1
    assert result.errors[0].extensions["code"] == "MALFORMED_CURSOR"
    assert result.errors[0].message.startswith("Invalid cursor")
    assert result.errors[0].path == ["paginatedCards"]


async def test_invalid_page_size_error_code(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 0},
        context_value=graphql_context,
    )

    assert result.errors[0].extensions["code"] == "INVALID_PAGE_SIZE"
    assert result.errors[0].extensions["limit"] == 0


async def test_client_errors_are_not_masked(masked_schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await masked_schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": -1},
        context_value=graphql_context,
    )

    assert result.errors[0].extensions["code"] == "INVALID_PAGE_SIZE"
    assert "must be a positive integer" in result.errors[0].message


async def test_large_first_returns_every_card(schema: CardSchema, graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 500},
        context_value=graphql_context,
    )

    assert result.errors is None
    page = result.data["paginatedCards"]
    assert page["totalCount"] == 5
    assert page["pageInfo"]["hasNextPage"] is False


async def test_cursor_beyond_key_range_is_malformed(
    schema: CardSchema, graphql_context: GraphQLContext
) -> None:
    oversized = base64.b64encode(b"9" * 5000).decode()

    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 2, "after": oversized},
        context_value=graphql_context,
    )

    assert result.data == {"paginatedCards": None}
    assert result.errors[0].extensions["code"] == "MALFORMED_CURSOR"


async def test_store_error_code_when_unmasked(schema: CardSchema) -> None:
    result = await schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3},
        context_value=failing_context(StoreError("Page query failed: OperationalError")),
    )

    assert result.data == {"paginatedCards": None}
    assert result.errors[0].extensions == {"code": "STORE_ERROR"}


async def test_store_error_is_masked(masked_schema: CardSchema) -> None:
    result = await masked_schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3},
        context_value=failing_context(StoreError("Page query failed: OperationalError")),
    )

    assert result.errors[0].message == MASKED_ERROR_MESSAGE
    assert result.errors[0].extensions == {"code": "INTERNAL_ERROR"}


async def test_unexpected_exception_is_masked(masked_schema: CardSchema) -> None:
    result = await masked_schema.execute(
        PAGINATED_CARDS_QUERY,
        variable_values={"first": 3},
        context_value=failing_context(RuntimeError("database password is hunter2")),
    )

    assert result.errors[0].message == MASKED_ERROR_MESSAGE
    assert "hunter2" not in str(result.errors[0].formatted)


async def test_depth_limit(graphql_context: GraphQLContext) -> None:
    from cardgraph.features.graphql.schema import create_schema

    shallow = create_schema(max_query_depth=2)

    result = await shallow.execute(PAGINATED_CARDS_QUERY, context_value=graphql_context)

    assert result.errors
    assert "exceeds maximum operation depth" in result.errors[0].message


def test_context_requires_pagination_service() -> None:
    with pytest.raises(TypeError, match="pagination"):
        GraphQLContext()
