"""CLI commands for category management."""

from __future__ import annotations

import click
from flask.cli import with_appcontext

from app.categories import services


@click.group("categories")
def categories_cli():
    """Category management commands."""


def register_commands(app):
    """Register CLI commands with the application."""
    app.cli.add_command(categories_cli)

    categories_cli.add_command(seed_categories)
    categories_cli.add_command(list_categories)


@click.command("seed")
@with_appcontext
def seed_categories() -> None:
    """Create the default categories that are missing."""
    created = services.ensure_default_categories()
    if created:
        click.echo(f"Created {created} default categories")
    else:
        click.echo("All default categories already exist")


@click.command("list")
@click.option("--search", default=None, help="Only show categories whose name contains this text")
@with_appcontext
def list_categories(search: str | None) -> None:
    """List categories ordered by name."""
    categories = services.list_categories(search=search)
    if not categories:
        click.echo("No categories found")
        return

    headers = ["ID", "Name", "Color", "Default"]
    rows = [[str(c.id), c.name, c.color, "yes" if c.is_default else ""] for c in categories]
    col_widths = [max(len(row[i]) for row in [headers] + rows) for i in range(len(headers))]

    click.echo(" " + " | ".join(h.ljust(w) for h, w in zip(headers, col_widths)))
    click.echo("-" * (sum(col_widths) + 3 * (len(headers) - 1) + 2))
    for row in rows:
        click.echo(" " + " | ".join(cell.ljust(w) for cell, w in zip(row, col_widths)))

    click.echo(f"\nTotal categories: {len(categories)}")
