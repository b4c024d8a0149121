"""Cards feature: the paginated ``Card`` table."""

from cardgraph.features.cards.models import Card
from cardgraph.features.cards.schemas import CardResponse
from cardgraph.features.cards.service import create_card_pagination_service

__all__ = ["Card", "CardResponse", "create_card_pagination_service"]
