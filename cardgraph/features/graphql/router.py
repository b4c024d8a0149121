"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint at the configured path (``/graphql`` by default)
- Optional GraphQL IDE on GET
- Request context carrying the card pagination service and a request id
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast
from uuid import uuid4

from fastapi import BackgroundTasks, Request, Response
from strawberry.fastapi import GraphQLRouter

from cardgraph.features.graphql.context import GraphQLContext
from cardgraph.features.graphql.schema import create_schema
from cardgraph.infra.logging import set_log_context

if TYPE_CHECKING:
    from cardgraph.core.settings import GraphQLSettings

REQUEST_ID_HEADER = "X-Request-ID"


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    The pagination service is created by the application lifespan and
    read from ``app.state``. The request id comes from the
    ``X-Request-ID`` header when the client sends one.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    set_log_context(request_id=request_id)
    response.headers[REQUEST_ID_HEADER] = request_id

    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        pagination=request.app.state.card_pagination,
        request_id=request_id,
    )


def create_graphql_router(settings: GraphQLSettings, *, environment: str) -> GraphQLRouter:
    """Create GraphQL router with settings-based configuration."""
    schema = create_schema(
        max_query_depth=settings.max_query_depth,
        mask_errors=settings.should_mask_errors(environment),
    )

    return GraphQLRouter(
        schema,
        path=settings.path,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.graphql_ide or None,
    )


__all__ = ["create_graphql_router", "get_graphql_context"]
