"""Query resolvers for cards.

Provides:
- paginatedCards(first, after, name): forward cursor pagination over cards
"""

from __future__ import annotations

from typing import Annotated

import strawberry
from strawberry.types import Info

from cardgraph.core.pagination import EqualityFilter, PageRequest, PaginationError
from cardgraph.features.graphql.context import GraphQLContext
from cardgraph.features.graphql.error_handler import format_pagination_error
from cardgraph.features.graphql.types.cards import CardConnection

# Type aliases for annotated arguments
FirstArg = Annotated[
    int | None,
    strawberry.argument(description="Number of cards to return (server default when omitted)"),
]
AfterArg = Annotated[
    str | None,
    strawberry.argument(description="Cursor of the last card already seen"),
]
NameArg = Annotated[
    str | None,
    strawberry.argument(description="Only return cards with exactly this name"),
]


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="Forward page of cards ordered by CardID")
    async def paginated_cards(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        name: NameArg = None,
    ) -> CardConnection | None:
        """List cards in ascending ``CardID`` order with cursor pagination.

        Args:
            info: Strawberry info with context
            first: Page size
            after: Exclusive start cursor
            name: Exact card name filter

        Returns:
            CardConnection with edges and page info
        """
        request = PageRequest(
            limit=first,
            after=after,
            filter=EqualityFilter(field="name", value=name) if name is not None else None,
        )
        try:
            connection = await info.context.pagination.get_page(request)
        except PaginationError as e:
            raise format_pagination_error(e) from e

        return CardConnection.from_connection(connection)


__all__ = ["Query"]
