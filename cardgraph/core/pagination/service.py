"""Pagination service: the single entry point for fetching a page.

Flow for one call to :meth:`PaginationService.get_page`:

1. resolve the page size (request value, else the configured default)
2. decode the ``after`` cursor
3. build the keyset query
4. open one session, run the query, release the session
5. assemble the connection

Each call is independent. The only shared resource is the connection pool
behind the injected session factory.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from cardgraph.core.pagination.cursor import CursorCodec
from cardgraph.core.pagination.exceptions import (
    InvalidPageSizeError,
    PaginationError,
    StoreError,
)
from cardgraph.infra.metrics.prometheus import (
    pagination_page_size,
    pagination_query_duration_seconds,
    pagination_requests_total,
)

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from cardgraph.core.pagination.assembler import PageAssembler
    from cardgraph.core.pagination.query import PageQueryBuilder
    from cardgraph.core.pagination.schemas import Connection, PageRequest

logger = logging.getLogger(__name__)


class PaginationService:
    """Serve forward pages of a single table.

    Example:
        service = PaginationService(
            database.session_factory,
            PageQueryBuilder(Card, Card.card_id, {"name": Card.card_name}),
            PageAssembler("card_id"),
            default_limit=50,
        )
        connection = await service.get_page(PageRequest(limit=3))

    Attributes:
        session_factory: Factory for request-scoped sessions (owns the pool).
        builder: Query builder for the paginated table.
        assembler: Connection assembler matching the builder's key.
        default_limit: Page size used when a request gives none. ``None``
            makes the limit mandatory.
        max_limit: Largest accepted page size. ``None`` disables the check.
        query_timeout: Seconds before the store query is abandoned.
            ``None`` waits indefinitely.
        exact_has_next_page: Fetch a lookahead row for an exact
            ``has_next_page`` instead of the full-page heuristic.
        name: Label used in logs and errors.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        builder: PageQueryBuilder,
        assembler: PageAssembler,
        *,
        default_limit: int | None = None,
        max_limit: int | None = None,
        query_timeout: float | None = None,
        exact_has_next_page: bool = False,
        name: str = "page",
    ) -> None:
        self.session_factory = session_factory
        self.builder = builder
        self.assembler = assembler
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.query_timeout = query_timeout
        self.exact_has_next_page = exact_has_next_page
        self.name = name

    async def get_page(self, request: PageRequest) -> Connection[Any]:
        """Fetch the page described by ``request``.

        Raises:
            InvalidPageSizeError: If the page size is missing, not positive,
                or above ``max_limit``.
            MalformedCursorError: If ``request.after`` does not decode.
            InvalidFilterError: If the filter names an unknown attribute.
            StoreError: If the store query fails or times out.
        """
        try:
            limit = self._resolve_limit(request.limit)
            after_key = CursorCodec.decode(request.after) if request.after is not None else None
            statement = self.builder.build(
                limit=limit,
                after_key=after_key,
                filter=request.filter,
                lookahead=self.exact_has_next_page,
            )
            rows = await self._execute(statement)
        except PaginationError as e:
            pagination_requests_total.labels(outcome=e.code.lower()).inc()
            raise

        connection = self.assembler.assemble(rows, limit, exact=self.exact_has_next_page)

        pagination_requests_total.labels(outcome="ok").inc()
        pagination_page_size.observe(connection.total_count)
        logger.debug(
            "Served page",
            extra={
                "pagination": self.name,
                "limit": limit,
                "after_key": after_key,
                "filter_field": request.filter.field if request.filter else None,
                "total_count": connection.total_count,
                "has_next_page": connection.page_info.has_next_page,
            },
        )
        return connection

    def _resolve_limit(self, limit: int | None) -> int:
        if limit is None:
            if self.default_limit is None:
                raise InvalidPageSizeError(None, "a page size is required")
            return self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidPageSizeError(limit, "must be a positive integer")
        if self.max_limit is not None and limit > self.max_limit:
            raise InvalidPageSizeError(limit, f"must not exceed {self.max_limit}")
        return limit

    async def _execute(self, statement: Select[Any]) -> list[Any]:
        """Run one statement on a fresh session and return its entities."""
        start = time.perf_counter()
        try:
            async with self.session_factory() as session:
                async with asyncio.timeout(self.query_timeout):
                    result = await session.execute(statement)
                    return list(result.scalars().all())
        except TimeoutError as e:
            logger.warning(
                "Page query timed out",
                extra={"pagination": self.name, "timeout": self.query_timeout},
            )
            msg = f"Page query timed out after {self.query_timeout}s"
            raise StoreError(msg, operation=self.name) from e
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                "Page query failed",
                extra={"pagination": self.name, "error": str(e)},
            )
            msg = f"Page query failed: {type(e).__name__}"
            raise StoreError(msg, operation=self.name) from e
        finally:
            pagination_query_duration_seconds.observe(time.perf_counter() - start)


__all__ = ["PaginationService"]
