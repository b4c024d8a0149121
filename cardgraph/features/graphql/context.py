"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides the
card pagination service plus the request id used for log correlation.

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

if TYPE_CHECKING:
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from cardgraph.core.pagination import PaginationService


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Standard fields (per Strawberry docs):
    - request: The HTTP request
    - response: The HTTP response (for setting headers)
    - background_tasks: FastAPI BackgroundTasks

    Custom fields:
    - pagination: Card pagination service (required, keyword-only)
    - request_id: Correlation id, also set on the log context

    Example usage in resolver:
        connection = await info.context.pagination.get_page(request)
    """

    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    pagination: PaginationService = field(kw_only=True)
    request_id: str | None = None


__all__ = ["GraphQLContext"]
