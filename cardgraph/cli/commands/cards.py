"""Card pagination commands.

Example:bash
    # First three cards
    cardgraph cards page --first 3

    # Next page, only cards with an exact name
    cardgraph cards page --first 3 --after Mw== --name "Coalition Victory"
"""

import json
import sys

import click

from cardgraph.cli.utils import coro, error
from cardgraph.core.pagination import EqualityFilter, PageRequest, PaginationError
from cardgraph.core.settings import get_db_settings, get_pagination_settings
from cardgraph.features.cards import CardResponse, create_card_pagination_service
from cardgraph.infra.database import Database


@click.group(name="cards")
def cards() -> None:
    """Card catalogue commands."""


@cards.command()
@click.option("--first", type=int, default=None, help="Page size (default: PAGINATION_DEFAULT_LIMIT)")
@click.option("--after", default=None, help="Cursor of the last card already seen")
@click.option("--name", default=None, help="Only cards with exactly this name")
@coro
async def page(first: int | None, after: str | None, name: str | None) -> None:
    """Fetch one page of cards and print it as JSON."""
    database = Database.from_settings(get_db_settings())
    service = create_card_pagination_service(database.session_factory, get_pagination_settings())
    request = PageRequest(
        limit=first,
        after=after,
        filter=EqualityFilter(field="name", value=name) if name is not None else None,
    )

    try:
        connection = await service.get_page(request)
    except PaginationError as e:
        error(f"{e.code}: {e.detail}")
        sys.exit(1)
    finally:
        await database.dispose()

    payload = connection.to_dict(
        node_fn=lambda card: CardResponse.model_validate(card).model_dump(by_alias=True)
    )
    click.echo(json.dumps(payload, indent=2))
