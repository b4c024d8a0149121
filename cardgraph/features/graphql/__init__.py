"""GraphQL feature: Strawberry schema over the card pagination service."""

from cardgraph.features.graphql.router import create_graphql_router
from cardgraph.features.graphql.schema import CardSchema, create_schema

__all__ = ["CardSchema", "create_graphql_router", "create_schema"]
