"""Main CLI entry point for cardgraph management commands."""

import click

from cardgraph.cli.commands import cards, database, server
from cardgraph.infra.logging import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="cardgraph")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Cardgraph CLI - serve and inspect the paginated card catalogue.

    \b
    Commands:
      serve      Run the GraphQL server
      db         Database checks and table creation
      cards      Fetch pages of cards from the command line

    \b
    Quick Start:
      cardgraph db check
      cardgraph db create-tables
      cardgraph cards page --first 3
      cardgraph serve
    """
    ctx.ensure_object(dict)


cli.add_command(server.serve)
cli.add_command(database.db)
cli.add_command(cards.cards)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
