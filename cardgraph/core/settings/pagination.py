"""Pagination settings for paginated connections.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=50, PAGINATION_MAX_LIMIT=500
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_limit: Page size when a request gives none.
        max_limit: Optional cap on the page size. Unset (the default) accepts
            any positive size; when set, larger requests are rejected.
        exact_has_next_page: Fetch one lookahead row so ``hasNextPage`` is
            exact. When False (the default) a full page reports
            ``hasNextPage=true`` even if nothing follows it.
        query_timeout: Seconds before a page query is abandoned.
    """

    default_limit: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Default page size when limit not specified",
    )
    max_limit: int | None = Field(
        default=None,
        ge=1,
        le=10000,
        description="Largest accepted page size; unset accepts any positive size",
    )
    exact_has_next_page: bool = Field(
        default=False,
        description="Use a lookahead row instead of the full-page heuristic for hasNextPage",
    )
    query_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=300.0,
        description="Seconds before a page query is abandoned",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.max_limit is not None and self.default_limit > self.max_limit:
            msg = "default_limit must not exceed max_limit"
            raise ValueError(msg)
        return self

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
