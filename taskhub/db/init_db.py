"""Database initialisation utility.

Usage (CLI):
    python -m taskhub.db.init_db          # create tables if they don't exist
    python -m taskhub.db.init_db --reset  # drop all tables first, then recreate
    taskhub-init-db --reset

Run it once before ``taskhub-seed``; the seeder expects the tables to exist.
"""

from __future__ import annotations

import click
from sqlalchemy import MetaData

from taskhub.db import session
from taskhub.db.base import Base
from taskhub.models import project  # noqa: F401  – ensures Project/Task models are registered
from taskhub.models import user  # noqa: F401  – ensures Role/User models are registered


def init_db(*, reset: bool = False) -> None:
    """
    Create all database tables (optionally dropping existing ones first).

    Args:
        reset: If True, **drops** all tables before creating them again.
    """
    metadata: MetaData = Base.metadata

    if reset:
        click.echo("Dropping existing tables …")
        metadata.drop_all(bind=session.engine)

    click.echo("Creating tables …")
    metadata.create_all(bind=session.engine)
    click.echo("Done ✔")


# ------------------------------------------------------------------------- #
# Optional command-line interface using `click`                             #
# ------------------------------------------------------------------------- #
@click.command(help="Initialise the database schema.")
@click.option(
    "--reset",
    is_flag=True,
    default=False,
    help="Drop all tables before recreating them.",
)
def main(reset: bool) -> None:
    """CLI wrapper."""
    init_db(reset=reset)


if __name__ == "__main__":  # pragma: no cover
    main()
