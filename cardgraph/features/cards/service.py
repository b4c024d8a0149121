"""Card pagination wiring."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cardgraph.core.pagination import PageAssembler, PageQueryBuilder, PaginationService
from cardgraph.features.cards.models import Card

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from cardgraph.core.settings.pagination import PaginationSettings

# Public filter names accepted in page requests
CARD_FILTERS = {"name": Card.card_name}


def create_card_pagination_service(
    session_factory: async_sessionmaker[AsyncSession],
    settings: PaginationSettings,
) -> PaginationService:
    """Build the pagination service for ``Card`` rows ordered by ``CardID``."""
    return PaginationService(
        session_factory,
        PageQueryBuilder(Card, Card.card_id, CARD_FILTERS),
        PageAssembler("card_id"),
        default_limit=settings.default_limit,
        max_limit=settings.max_limit,
        query_timeout=settings.query_timeout,
        exact_has_next_page=settings.exact_has_next_page,
        name="paginated_cards",
    )


__all__ = ["CARD_FILTERS", "create_card_pagination_service"]
