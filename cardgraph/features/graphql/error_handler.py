"""GraphQL error classification, logging and masking.

Pagination errors are converted to ``GraphQLError`` in the resolver with a
stable ``extensions.code``. Client errors (bad cursor, page size or filter)
are always shown as-is; anything else is logged with its stack trace and,
when masking is enabled, replaced by Strawberry's ``MaskErrors`` extension
with a generic message.
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError

from cardgraph.core.pagination.exceptions import (
    InvalidFilterError,
    InvalidPageSizeError,
    MalformedCursorError,
    StoreError,
)

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

    from cardgraph.core.pagination.exceptions import PaginationError

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "format_pagination_error",
    "is_user_facing_error",
    "log_error",
    "should_mask_error",
]


# ============================================================================
# Error Categories
# ============================================================================


class ErrorCategory:
    """Error codes exposed under ``extensions.code``."""

    MALFORMED_CURSOR = MalformedCursorError.code
    INVALID_PAGE_SIZE = InvalidPageSizeError.code
    INVALID_FILTER = InvalidFilterError.code
    STORE_ERROR = StoreError.code
    VALIDATION = "GRAPHQL_VALIDATION_FAILED"
    DEPTH_LIMIT = "DEPTH_LIMIT_EXCEEDED"
    INTERNAL = "INTERNAL_ERROR"


USER_FACING_CODES = frozenset(
    {
        ErrorCategory.MALFORMED_CURSOR,
        ErrorCategory.INVALID_PAGE_SIZE,
        ErrorCategory.INVALID_FILTER,
        ErrorCategory.VALIDATION,
        ErrorCategory.DEPTH_LIMIT,
    }
)


# ============================================================================
# Error Classification
# ============================================================================


def is_user_facing_error(error: GraphQLError) -> bool:
    """Determine if an error should be shown to the client as-is.

    User-facing errors are the client's own fault: a bad cursor, page size
    or filter, a query that fails validation, or one nested too deeply.
    Errors without an original exception come from parsing or validation
    and are user-facing too.
    """
    code = (error.extensions or {}).get("code")
    if code in USER_FACING_CODES:
        return True
    if code is not None:
        return False
    return error.original_error is None


def should_mask_error(error: GraphQLError) -> bool:
    """Predicate for Strawberry's ``MaskErrors`` extension."""
    return not is_user_facing_error(error)


# ============================================================================
# Conversion
# ============================================================================


def format_pagination_error(error: PaginationError) -> GraphQLError:
    """Convert a pagination error into a GraphQL error with a stable code.

    Example:
        try:
            connection = await service.get_page(request)
        except PaginationError as e:
            raise format_pagination_error(e) from e
    """
    extensions: dict[str, Any] = {"code": error.code}
    if error.code != ErrorCategory.STORE_ERROR and error.extra:
        extensions.update(error.extra)
    return GraphQLError(error.detail, extensions=extensions, original_error=error)


# ============================================================================
# Error Logging
# ============================================================================


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log an error with full details for server-side debugging."""
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_path": error.path,
        "error_code": (error.extensions or {}).get("code"),
    }

    if execution_context is not None and execution_context.operation_name:
        log_context["operation_name"] = execution_context.operation_name

    user_facing = is_user_facing_error(error)
    original = error.original_error
    if original is not None:
        log_context["exception_type"] = type(original).__name__
        if not user_facing:
            log_context["stack_trace"] = "".join(
                traceback.format_exception(type(original), original, original.__traceback__)
            )

    if user_facing:
        logger.info("GraphQL user-facing error", extra=log_context)
    else:
        logger.error("GraphQL internal error", extra=log_context)
