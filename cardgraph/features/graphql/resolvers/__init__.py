"""GraphQL resolvers."""

from cardgraph.features.graphql.resolvers.queries import Query

__all__ = ["Query"]
