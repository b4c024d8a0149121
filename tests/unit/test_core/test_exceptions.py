"""Tests for the application exception hierarchy."""

from __future__ import annotations

from cardgraph.core.exceptions import AppException
from cardgraph.core.pagination import InvalidFilterError, PaginationError, StoreError


def test_problem_detail_includes_extra():
    exc = AppException(
        status_code=503,
        detail="Card store unavailable",
        type="store-error",
        extra={"operation": "cards"},
    )

    assert exc.to_problem_detail() == {
        "type": "store-error",
        "title": "Service Unavailable",
        "status": 503,
        "detail": "Card store unavailable",
        "operation": "cards",
    }


def test_pagination_errors_derive_type_from_code():
    exc = InvalidFilterError("color", ["name"])

    assert isinstance(exc, PaginationError)
    assert isinstance(exc, AppException)
    assert exc.type == "invalid-filter"
    assert exc.status_code == 400
    assert exc.title == "Bad Request"
    assert str(exc) == "Invalid filter field 'color'; must be one of ['name']"


def test_store_error_is_service_unavailable():
    exc = StoreError("Page query timed out after 1.0s", operation="paginated_cards")

    assert exc.status_code == 503
    assert exc.code == "STORE_ERROR"
    assert exc.to_problem_detail()["operation"] == "paginated_cards"
