"""Request and response models for cursor pagination.

The response side follows the Relay connection shape used by the GraphQL
transport:

    Connection
      total_count   rows in this page (not the whole table)
      page_info     PageInfo(last_cursor, has_next_page)
      edges         [Edge(cursor, node), ...]

All models are built per request and discarded with the response.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class EqualityFilter(BaseModel):
    """Equality predicate on a single non-key attribute.

    Attributes:
        field: Public name of the attribute (e.g. ``"name"``).
        value: Value the attribute must equal.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1, description="Attribute to filter on")
    value: Any = Field(description="Value the attribute must equal")


class PageRequest(BaseModel):
    """A request for one forward page.

    ``limit`` is validated by the pagination service rather than here so
    that a bad size surfaces as ``InvalidPageSizeError`` instead of a
    pydantic validation error.

    Attributes:
        limit: Maximum rows to return; ``None`` means use the service default.
        after: Cursor of the last row already seen; ``None`` for the first page.
        filter: Optional equality filter.
    """

    model_config = ConfigDict(frozen=True)

    limit: int | None = Field(default=None, description="Page size")
    after: str | None = Field(default=None, description="Exclusive start cursor")
    filter: EqualityFilter | None = Field(default=None, description="Equality filter")


class PageInfo(BaseModel):
    """Continuation state of a page.

    Attributes:
        last_cursor: Cursor of the final edge, ``None`` for an empty page.
        has_next_page: Whether another page may follow. In the default
            heuristic mode this is ``True`` whenever the page is full, even
            if no rows remain.
    """

    last_cursor: str | None = Field(default=None, description="Cursor of the last item")
    has_next_page: bool = Field(default=False, description="Whether more items may exist")


class Edge(BaseModel, Generic[T]):
    """A single record paired with its own cursor."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    cursor: str = Field(description="Cursor for this item")
    node: T = Field(description="The data item")


class Connection(BaseModel, Generic[T]):
    """Relay-style envelope of one page of edges.

    Attributes:
        total_count: Number of edges in this page. Page-scoped, despite the name.
        page_info: Continuation metadata.
        edges: Edges in ascending ordering-key order.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    total_count: int = Field(default=0, ge=0, description="Rows returned in this page")
    page_info: PageInfo = Field(default_factory=PageInfo, description="Pagination metadata")
    edges: list[Edge[T]] = Field(default_factory=list, description="Items with cursors")

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    def to_dict(self, node_fn: Callable[[T], Any] | None = None) -> dict[str, Any]:
        """Serialize with camelCase keys matching the GraphQL wire shape.

        Args:
            node_fn: Optional callable converting each node to a JSON-ready value.
        """
        return {
            "totalCount": self.total_count,
            "pageInfo": {
                "lastCursor": self.page_info.last_cursor,
                "hasNextPage": self.page_info.has_next_page,
            },
            "edges": [
                {
                    "cursor": edge.cursor,
                    "node": node_fn(edge.node) if node_fn else edge.node,
                }
                for edge in self.edges
            ],
        }


__all__ = [
    "Connection",
    "Edge",
    "EqualityFilter",
    "PageInfo",
    "PageRequest",
]
