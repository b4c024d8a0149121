"""Strawberry GraphQL types."""

from cardgraph.features.graphql.types.cards import (
    CardConnection,
    CardEdge,
    CardType,
    PageInfoType,
)

__all__ = ["CardConnection", "CardEdge", "CardType", "PageInfoType"]
