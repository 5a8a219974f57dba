"""Management commands for the Scheduler API backend."""

from __future__ import annotations

import logging

import click
from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

from scheduler_api.core.config import get_database_url, mask_url_password
from scheduler_api.db.seed import seed_doctors
from scheduler_api.db.session import (
    create_tables,
    drop_tables,
    get_engine,
    get_sessionmaker,
)

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@click.group()
def cli() -> None:
    """Entry point for management commands."""
    load_dotenv()


@cli.command("create-tables")
def create_tables_command() -> None:
    """Create every table declared on the models."""
    try:
        create_tables(get_engine())
    except SQLAlchemyError as e:
        raise click.ClickException(f"Could not create tables: {e}") from e
    click.echo(f"Tables created on {mask_url_password(get_database_url())}")


@cli.command("drop-tables")
@click.confirmation_option(prompt="Drop every doctor table and its data?")
def drop_tables_command() -> None:
    """Drop every table declared on the models."""
    try:
        drop_tables(get_engine())
    except SQLAlchemyError as e:
        raise click.ClickException(f"Could not drop tables: {e}") from e
    click.echo(f"Tables dropped on {mask_url_password(get_database_url())}")


@cli.command("seed")
def seed_command() -> None:
    """Insert sample doctors, skipping registrations that already exist."""
    try:
        create_tables(get_engine())
        added = seed_doctors(get_sessionmaker())
    except SQLAlchemyError as e:
        raise click.ClickException(f"Could not seed doctors: {e}") from e
    click.echo(f"Seeded {added} doctor(s)")


if __name__ == "__main__":
    cli()
