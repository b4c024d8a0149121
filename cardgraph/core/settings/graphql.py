"""GraphQL server configuration settings.

Controls the GraphQL endpoint, IDE, query depth limit and error masking.
Environment variables use GRAPHQL_ prefix.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GraphQLIDE = Literal["graphiql", "apollo-sandbox", "pathfinder", False]


class GraphQLSettings(BaseSettings):
    """GraphQL server configuration.

    Environment variables use GRAPHQL_ prefix.
    Example: GRAPHQL_ENABLED=true, GRAPHQL_PATH=/graphql
    """

    enabled: bool = Field(
        default=True,
        description="Enable GraphQL endpoint",
    )
    path: str = Field(
        default="/graphql",
        min_length=1,
        max_length=255,
        pattern=r"^/.*$",
        description="GraphQL endpoint path",
    )
    graphql_ide: GraphQLIDE = Field(
        default="graphiql",
        description="GraphQL IDE to serve on GET: graphiql, apollo-sandbox, pathfinder, or false",
    )
    max_query_depth: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum query nesting depth",
    )
    mask_errors: bool | None = Field(
        default=None,
        description=(
            "Mask internal error details in responses. "
            "If None, masking is enabled only in production."
        ),
    )

    def should_mask_errors(self, environment: str) -> bool:
        """Resolve whether internal errors are masked for ``environment``."""
        if self.mask_errors is not None:
            return self.mask_errors
        return environment == "production"

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
