"""Pydantic schemas for the cards feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CardResponse(BaseModel):
    """Card representation used for JSON output."""

    card_id: int = Field(..., serialization_alias="CardID")
    card_name: str = Field(..., serialization_alias="CardName")
    card_flavor_text: str | None = Field(default=None, serialization_alias="CardFlavorText")
    card_oracle_text: str | None = Field(default=None, serialization_alias="CardOracleText")

    model_config = ConfigDict(from_attributes=True)
