"""GraphQL types for the paginated card connection.

Field names of ``Card`` keep the column spelling of the card table
(``CardID``, ``CardName``, ...); connection fields are camelCase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from cardgraph.features.cards.schemas import CardResponse

if TYPE_CHECKING:
    from cardgraph.core.pagination import Connection, PageInfo
    from cardgraph.features.cards.models import Card


@strawberry.type(name="Card", description="A trading card")
class CardType:
    """Card node."""

    card_id: strawberry.ID = strawberry.field(name="CardID", description="Ordering key of the card")
    card_name: str | None = strawberry.field(name="CardName", default=None)
    card_flavor_text: str | None = strawberry.field(name="CardFlavorText", default=None)
    card_oracle_text: str | None = strawberry.field(name="CardOracleText", default=None)

    @classmethod
    def from_pydantic(cls, card: CardResponse) -> CardType:
        return cls(
            card_id=strawberry.ID(str(card.card_id)),
            card_name=card.card_name,
            card_flavor_text=card.card_flavor_text,
            card_oracle_text=card.card_oracle_text,
        )

    @classmethod
    def from_model(cls, card: Card) -> CardType:
        """Convert: SQLAlchemy -> Pydantic -> GraphQL."""
        return cls.from_pydantic(CardResponse.model_validate(card))


@strawberry.type(name="PageInfo", description="Forward pagination metadata")
class PageInfoType:
    """Mirrors cardgraph.core.pagination.PageInfo."""

    last_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last card in this page; pass it as `after` for the next page",
    )
    has_next_page: bool = strawberry.field(
        default=False,
        description="Whether another page may follow (true for any full page)",
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> PageInfoType:
        return cls(last_cursor=page_info.last_cursor, has_next_page=page_info.has_next_page)


@strawberry.type(name="CardEdge", description="A card with its cursor")
class CardEdge:
    cursor: str
    node: CardType


@strawberry.type(name="CardConnection", description="One page of cards")
class CardConnection:
    """Relay-style page of cards."""

    total_count: int = strawberry.field(description="Number of cards in this page")
    page_info: PageInfoType
    edges: list[CardEdge]

    @classmethod
    def from_connection(cls, connection: Connection[Card]) -> CardConnection:
        return cls(
            total_count=connection.total_count,
            page_info=PageInfoType.from_page_info(connection.page_info),
            edges=[
                CardEdge(cursor=edge.cursor, node=CardType.from_model(edge.node))
                for edge in connection.edges
            ],
        )


__all__ = ["CardConnection", "CardEdge", "CardType", "PageInfoType"]
