"""GraphQL test fixtures and queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cardgraph.features.graphql.context import GraphQLContext
from cardgraph.features.graphql.schema import create_schema

if TYPE_CHECKING:
    from cardgraph.core.pagination import PaginationService
    from cardgraph.features.graphql.schema import CardSchema

PAGINATED_CARDS_QUERY = """
query PaginatedCards($first: Int, $after: String, $name: String) {
    paginatedCards(first: $first, after: $after, name: $name) {
        totalCount
        pageInfo {
            lastCursor
            hasNextPage
        }
        edges {
            cursor
            node {
                CardID
                CardName
                CardFlavorText
                CardOracleText
            }
        }
    }
}
"""


@pytest.fixture
def schema() -> CardSchema:
    return create_schema(max_query_depth=10, mask_errors=False)


@pytest.fixture
def masked_schema() -> CardSchema:
    return create_schema(max_query_depth=10, mask_errors=True)


@pytest.fixture
def graphql_context(card_service: PaginationService) -> GraphQLContext:
    """Context carrying the card service over the seeded database."""
    return GraphQLContext(pagination=card_service, request_id="test-request")
