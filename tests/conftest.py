"""Pytest configuration and fixtures for the test suite."""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient, FlaskCliRunner
from sqlalchemy.orm import scoped_session

# Add the project root to the Python path first to avoid import issues
project_root = str(Path(__file__).parent.parent)
sys.path.insert(0, project_root)

# Set test environment variables before the application is imported
os.environ.update(
    {
        "FLASK_ENV": "testing",
        "SECRET_KEY": "test-secret-key",
        "RATELIMIT_ENABLED": "false",
    }
)
os.environ.pop("DATABASE_URL", None)

from app import create_app  # noqa: E402
from app.auth.models import User  # noqa: E402
from app.categories.models import Category  # noqa: E402
from app.extensions import db  # noqa: E402


@pytest.fixture(scope="function")
def app() -> Generator[Flask, None, None]:
    """Create and configure a new app instance for testing.

    This fixture is function-scoped to ensure a clean database for each test.
    """
    app = create_app("testing")
    app.config.update(
        SERVER_NAME="localhost",
        PREFERRED_URL_SCHEME="http",
    )

    ctx = app.app_context()
    ctx.push()
    db.create_all()

    yield app

    db.session.remove()
    db.drop_all()
    ctx.pop()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client for the application."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask) -> FlaskCliRunner:
    """Create a CLI runner for testing Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def session(app: Flask) -> scoped_session:
    """Database session bound to the test application."""
    return db.session


def _make_user(session: scoped_session, username: str, password: str, is_admin: bool = False) -> User:
    user = User(username=username, email=f"{username}@example.com", is_admin=is_admin)
    user.set_password(password)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def test_user(session: scoped_session) -> User:
    """A regular, non-admin user."""
    return _make_user(session, "testuser_1", "testpass")


@pytest.fixture
def admin_user(session: scoped_session) -> User:
    """A user allowed into the admin panel."""
    return _make_user(session, "admin", "adminpass", is_admin=True)


@pytest.fixture
def test_category(session: scoped_session) -> Category:
    """A persisted category."""
    category = Category(name="Test Category", description="Test category description", color="#FF0000")
    session.add(category)
    session.commit()
    session.refresh(category)
    return category


class AuthActions:
    """Helper class for authentication-related test actions."""

    def __init__(self, client: FlaskClient) -> None:
        self._client = client

    def login_as(self, user: User) -> FlaskClient:
        """Mark the client's session as logged in for ``user``."""
        with self._client.session_transaction() as sess:  # type: ignore[func-returns-value]
            sess["_user_id"] = str(user.id)
            sess["_fresh"] = True
        return self._client

    def login(self, username: str, password: str):
        """Log in through the login form."""
        return self._client.post("/auth/login", data={"username": username, "password": password})

    def logout(self):
        return self._client.get("/auth/logout")


@pytest.fixture
def auth(client: FlaskClient) -> AuthActions:
    """Return an object with authentication methods for testing."""
    return AuthActions(client)


@pytest.fixture
def admin_client(client: FlaskClient, auth: AuthActions, admin_user: User) -> FlaskClient:
    """A test client logged in as an admin."""
    return auth.login_as(admin_user)
