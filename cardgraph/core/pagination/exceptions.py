"""Request-scoped pagination errors.

Every error here aborts a single page request and is reported to the
caller; none of them is fatal to the process and none is retried.
"""

from __future__ import annotations

from typing import Any

from cardgraph.core.exceptions import AppException


class PaginationError(AppException):
    """Base class for errors raised while serving a page.

    Attributes:
        code: Stable machine-readable code, exposed to GraphQL clients
            under ``extensions.code``.
    """

    code = "PAGINATION_ERROR"
    status = 400

    def __init__(self, detail: str, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            status_code=self.status,
            detail=detail,
            type=self.code.lower().replace("_", "-"),
            extra=extra,
        )


class MalformedCursorError(PaginationError):
    """Cursor token could not be decoded into an ordering key."""

    code = "MALFORMED_CURSOR"

    def __init__(self, cursor: str, reason: str) -> None:
        self.cursor = cursor
        self.reason = reason
        super().__init__(
            f"Invalid cursor: {reason}",
            extra={"cursor": cursor},
        )


class InvalidPageSizeError(PaginationError):
    """Requested page size is absent, non-positive, or above the maximum."""

    code = "INVALID_PAGE_SIZE"

    def __init__(self, limit: int | None, reason: str) -> None:
        self.limit = limit
        super().__init__(
            f"Invalid page size: {reason}",
            extra={"limit": limit},
        )


class InvalidFilterError(PaginationError):
    """Filter names an attribute that cannot be filtered on."""

    code = "INVALID_FILTER"

    def __init__(self, field: str, allowed: list[str]) -> None:
        self.field = field
        self.allowed = allowed
        super().__init__(
            f"Invalid filter field {field!r}; must be one of {sorted(allowed)}",
            extra={"field": field},
        )


class StoreError(PaginationError):
    """The backing store failed to answer the page query.

    Covers connectivity failures, timeouts and query errors. The original
    exception is always chained as ``__cause__``.
    """

    code = "STORE_ERROR"
    status = 503

    def __init__(self, detail: str, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(
            detail,
            extra={"operation": operation} if operation else None,
        )


__all__ = [
    "InvalidFilterError",
    "InvalidPageSizeError",
    "MalformedCursorError",
    "PaginationError",
    "StoreError",
]
