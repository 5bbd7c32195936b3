"""Application-level CLI commands."""

import click
from flask.cli import with_appcontext

from app.database import create_tables, drop_tables


def register_commands(app):
    """Register CLI commands with the application."""
    app.cli.add_command(init_db)


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables first")
@with_appcontext
def init_db(drop: bool) -> None:
    """Create the database tables."""
    if drop:
        click.confirm("This will delete all data. Continue?", abort=True)
        drop_tables()
        click.echo("Dropped all tables")
    create_tables()
    click.echo("Database tables created")
