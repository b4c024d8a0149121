"""Database management commands.

Example:bash
    # Check the database answers queries
    cardgraph db check

    # Create the Card table if it does not exist
    cardgraph db create-tables
"""

import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from cardgraph.cli.utils import coro, error, info, success
from cardgraph.core.settings import get_db_settings
from cardgraph.infra.database import Database


@click.group(name="db")
def db() -> None:
    """Database management commands."""


@db.command()
@coro
async def check() -> None:
    """Test the database connection."""
    settings = get_db_settings()
    info(f"Connecting to {settings.host}:{settings.port}/{settings.name}...")

    database = Database.from_settings(settings)
    try:
        await database.check()
    except (SQLAlchemyError, OSError) as e:
        error(f"Database connection failed: {e}")
        sys.exit(1)
    finally:
        await database.dispose()

    success("Database connection successful")


@db.command(name="create-tables")
@coro
async def create_tables() -> None:
    """Create the card table if it does not exist."""
    database = Database.from_settings(get_db_settings())
    try:
        await database.create_all()
    except (SQLAlchemyError, OSError) as e:
        error(f"Failed to create tables: {e}")
        sys.exit(1)
    finally:
        await database.dispose()

    success("Tables created")
