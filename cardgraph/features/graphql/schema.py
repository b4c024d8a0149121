"""GraphQL schema assembly."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry

from cardgraph.features.graphql.error_handler import log_error
from cardgraph.features.graphql.extensions import get_extensions
from cardgraph.features.graphql.resolvers import Query

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)


class CardSchema(strawberry.Schema):
    """Schema that logs every error through :func:`log_error`."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


def create_schema(*, max_query_depth: int = 10, mask_errors: bool = False) -> CardSchema:
    """Create the schema with its configured extensions.

    Example:
        settings = get_graphql_settings()
        schema = create_schema(
            max_query_depth=settings.max_query_depth,
            mask_errors=settings.should_mask_errors(get_app_settings().environment),
        )
    """
    schema = CardSchema(
        query=Query,
        extensions=get_extensions(max_query_depth=max_query_depth, mask_errors=mask_errors),
    )
    logger.debug("GraphQL schema created", extra={"mask_errors": mask_errors})
    return schema


__all__ = ["CardSchema", "create_schema"]
