"""Strawberry extensions for the GraphQL schema.

Provides:
- Query depth limiting
- Masking of internal errors (store failures, bugs) when enabled
"""

from __future__ import annotations

import logging

from graphql import GraphQLError
from strawberry.extensions import MaskErrors, QueryDepthLimiter, SchemaExtension

from cardgraph.features.graphql.error_handler import ErrorCategory, should_mask_error

logger = logging.getLogger(__name__)

MASKED_ERROR_MESSAGE = "An internal error occurred. Please try again later."


class MaskInternalErrors(MaskErrors):
    """``MaskErrors`` that tags masked errors with ``INTERNAL_ERROR``."""

    def __init__(self) -> None:
        super().__init__(should_mask_error=should_mask_error, error_message=MASKED_ERROR_MESSAGE)

    def anonymise_error(self, error: GraphQLError) -> GraphQLError:
        return GraphQLError(
            message=self.error_message,
            nodes=error.nodes,
            source=error.source,
            positions=error.positions,
            path=error.path,
            extensions={"code": ErrorCategory.INTERNAL},
        )


def get_extensions(*, max_query_depth: int, mask_errors: bool) -> list[SchemaExtension]:
    """Get list of Strawberry extensions for the schema."""
    extensions: list[SchemaExtension] = [QueryDepthLimiter(max_depth=max_query_depth)]
    if mask_errors:
        extensions.append(MaskInternalErrors())

    logger.debug(
        "GraphQL extensions configured",
        extra={"max_query_depth": max_query_depth, "mask_errors": mask_errors},
    )
    return extensions


__all__ = ["MASKED_ERROR_MESSAGE", "MaskInternalErrors", "get_extensions"]
