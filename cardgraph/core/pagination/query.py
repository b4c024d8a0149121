"""Keyset query construction for forward cursor pagination.

Instead of OFFSET, the query seeks past the last key the client has seen:

    SELECT * FROM "Card"
    WHERE "CardID" > :after_key AND "CardName" = :name
    ORDER BY "CardID" ASC
    LIMIT :limit

Both conditions are optional. Every value travels as a bound parameter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, select

from cardgraph.core.pagination.exceptions import InvalidFilterError, InvalidPageSizeError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy.orm import InstrumentedAttribute

    from cardgraph.core.pagination.schemas import EqualityFilter


class PageQueryBuilder:
    """Build a bounded, ascending range query over a single ordering key.

    Example:
        builder = PageQueryBuilder(
            Card,
            key_column=Card.card_id,
            filterable={"name": Card.card_name},
        )
        stmt = builder.build(limit=10, after_key=3)

    Attributes:
        model: Mapped class to select.
        key_column: Unique, monotonically increasing ordering column.
        filterable: Public attribute names mapped to the columns they filter.
    """

    def __init__(
        self,
        model: type[Any],
        key_column: InstrumentedAttribute[Any],
        filterable: Mapping[str, InstrumentedAttribute[Any]] | None = None,
    ) -> None:
        self.model = model
        self.key_column = key_column
        self.filterable = dict(filterable or {})

        if any(column is key_column for column in self.filterable.values()):
            msg = "The ordering key cannot be used as a filter column"
            raise ValueError(msg)

    def build(
        self,
        *,
        limit: int,
        after_key: int | None = None,
        filter: EqualityFilter | None = None,
        lookahead: bool = False,
    ) -> Select[Any]:
        """Build the page query.

        Args:
            limit: Page size; must be positive.
            after_key: Exclusive lower bound on the key; ``None`` for the first page.
            filter: Optional equality filter on a filterable attribute.
            lookahead: Fetch one extra row so the caller can tell whether
                another page exists.

        Returns:
            Select statement ordered ascending by the key.

        Raises:
            InvalidPageSizeError: If ``limit`` is not positive.
            InvalidFilterError: If the filter names an unknown attribute.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidPageSizeError(limit, "must be a positive integer")

        statement = select(self.model)

        if after_key is not None:
            statement = statement.where(self.key_column > after_key)

        if filter is not None:
            statement = statement.where(self._filter_column(filter.field) == filter.value)

        return statement.order_by(self.key_column.asc()).limit(
            limit + 1 if lookahead else limit
        )

    def _filter_column(self, field: str) -> InstrumentedAttribute[Any]:
        try:
            return self.filterable[field]
        except KeyError:
            raise InvalidFilterError(field, list(self.filterable)) from None


__all__ = ["PageQueryBuilder"]
