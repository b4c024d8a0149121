"""Forward cursor pagination over a single monotonic key.

A page request names a size, an optional ``after`` cursor and an optional
equality filter. The service decodes the cursor, seeks past it with a
keyset query, and wraps the rows in a Relay-style connection:

    service = PaginationService(session_factory, builder, assembler)
    first = await service.get_page(PageRequest(limit=3))
    second = await service.get_page(
        PageRequest(limit=3, after=first.page_info.last_cursor)
    )

Cursors are opaque base64 strings that clients pass back unchanged.
"""

from cardgraph.core.pagination.assembler import PageAssembler
from cardgraph.core.pagination.cursor import CursorCodec
from cardgraph.core.pagination.exceptions import (
    InvalidFilterError,
    InvalidPageSizeError,
    MalformedCursorError,
    PaginationError,
    StoreError,
)
from cardgraph.core.pagination.query import PageQueryBuilder
from cardgraph.core.pagination.schemas import (
    Connection,
    Edge,
    EqualityFilter,
    PageInfo,
    PageRequest,
)
from cardgraph.core.pagination.service import PaginationService

__all__ = [
    "Connection",
    "CursorCodec",
    "Edge",
    "EqualityFilter",
    "InvalidFilterError",
    "InvalidPageSizeError",
    "MalformedCursorError",
    "PageAssembler",
    "PageInfo",
    "PageQueryBuilder",
    "PageRequest",
    "PaginationError",
    "PaginationService",
    "StoreError",
]
