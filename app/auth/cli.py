"""CLI commands for user management."""

from __future__ import annotations

import click
from flask.cli import with_appcontext
from sqlalchemy import select

from app.auth import services
from app.auth.models import User
from app.extensions import db


@click.group("user")
def user_cli():
    """User management commands."""


def register_commands(app):
    """Register CLI commands with the application."""
    app.cli.add_command(user_cli)

    user_cli.add_command(list_users)
    user_cli.add_command(create_user)
    user_cli.add_command(reset_password)


@click.command("list")
@click.option("--admin-only", is_flag=True, help="Show only admin users")
@with_appcontext
def list_users(admin_only: bool) -> None:
    """List all users in the system."""
    query = select(User)
    if admin_only:
        query = query.where(User.is_admin.is_(True))

    users = db.session.scalars(query.order_by(User.email)).all()

    if not users:
        click.echo("No users found" + (" matching the criteria" if admin_only else ""))
        return

    headers = ["ID", "Email", "Username", "Admin", "Active"]
    rows = [
        [
            str(user.id),
            user.email,
            user.username,
            "yes" if user.is_admin else "",
            "yes" if user.is_active else "no",
        ]
        for user in users
    ]

    col_widths = [max(len(str(row[i])) for row in [headers] + rows) for i in range(len(headers))]

    click.echo(" " + " | ".join(f"{h.ljust(w)}" for h, w in zip(headers, col_widths)))
    click.echo("-" * (sum(col_widths) + 3 * (len(headers) - 1) + 2))
    for row in rows:
        click.echo(" " + " | ".join(str(cell).ljust(w) for cell, w in zip(row, col_widths)))

    click.echo(f"\nTotal users: {len(users)}" + (" (admin only)" if admin_only else ""))


@click.command("create")
@click.option("--username", prompt=True, help="Username for the new user")
@click.option("--email", prompt=True, help="Email address for the new user")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password for the new user",
)
@click.option("--admin", is_flag=True, default=False, help="Make the user an admin")
@click.option("--active/--inactive", default=True, help="Set account active status (default: active)")
@with_appcontext
def create_user(username: str, email: str, password: str, admin: bool, active: bool = True) -> None:
    """Create a new user account."""
    try:
        user = services.create_user(username, email, password, is_admin=admin, is_active=active)
    except ValueError as e:
        click.echo(f"Error: {e}")
        return

    click.echo(f"Created {'admin ' if admin else ''}user {user.username} (id={user.id})")


@click.command("reset-password")
@click.option("--email", prompt="User email", help="Email of the user to reset password for")
@click.option(
    "--password",
    prompt="New password",
    hide_input=True,
    confirmation_prompt=True,
    help="New password for the user",
)
@with_appcontext
def reset_password(email: str, password: str) -> None:
    """Reset the password for a user."""
    user = db.session.scalar(select(User).filter_by(email=email.lower().strip()))

    if not user:
        click.echo(f"Error: No user found with email {email}")
        return

    user.set_password(password)
    db.session.commit()
    click.echo(f"Successfully updated password for user: {email}")
