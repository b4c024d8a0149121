"""SQLAlchemy models for the cards feature."""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from cardgraph.core.database import Base


class Card(Base):
    """A trading card.

    The table keeps the quoted, capitalised column names of the original
    ``public."Card"`` table; Python attributes are snake_case.
    ``card_id`` is the ordering key used for cursor pagination.
    """

    __tablename__ = "Card"

    card_id: Mapped[int] = mapped_column("CardID", primary_key=True, autoincrement=True)
    card_name: Mapped[str] = mapped_column("CardName", Text, nullable=False, index=True)
    card_flavor_text: Mapped[str | None] = mapped_column("CardFlavorText", Text, nullable=True)
    card_oracle_text: Mapped[str | None] = mapped_column("CardOracleText", Text, nullable=True)

    def __repr__(self) -> str:
        """Return card summary for debugging."""
        return f"<Card(card_id={self.card_id}, card_name={self.card_name!r})>"
