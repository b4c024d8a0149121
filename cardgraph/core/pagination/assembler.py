"""Shape ordered rows into a Relay connection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cardgraph.core.pagination.cursor import CursorCodec
from cardgraph.core.pagination.schemas import Connection, Edge, PageInfo

if TYPE_CHECKING:
    from collections.abc import Sequence


class PageAssembler:
    """Build a :class:`Connection` from the rows of one page query.

    Two modes decide ``has_next_page``:

    heuristic (default)
        ``len(rows) == limit``. A full page suggests more rows, a short
        page means the end was reached. When the remaining rows are an
        exact multiple of ``limit`` this reports a next page that turns
        out to be empty.

    exact
        The query fetched ``limit + 1`` rows. A surplus row proves there is
        a next page; it is dropped before edges are built.

    Attributes:
        key_attr: Attribute holding each row's ordering key.
        codec: Cursor codec used to encode keys.
    """

    def __init__(self, key_attr: str, codec: type[CursorCodec] = CursorCodec) -> None:
        self.key_attr = key_attr
        self.codec = codec

    def assemble(
        self,
        rows: Sequence[Any],
        limit: int,
        *,
        exact: bool = False,
    ) -> Connection[Any]:
        """Assemble a connection.

        Args:
            rows: Rows in ascending key order, as returned by the query.
            limit: Page size the query was built with.
            exact: Whether ``rows`` may hold one lookahead row.

        Returns:
            Connection with one edge per row on this page.
        """
        if exact:
            has_next_page = len(rows) > limit
            rows = rows[:limit]
        else:
            has_next_page = len(rows) == limit

        edges = [
            Edge(cursor=self.codec.encode(getattr(row, self.key_attr)), node=row)
            for row in rows
        ]

        return Connection(
            total_count=len(edges),
            page_info=PageInfo(
                last_cursor=edges[-1].cursor if edges else None,
                has_next_page=has_next_page and bool(edges),
            ),
            edges=edges,
        )


__all__ = ["PageAssembler"]
