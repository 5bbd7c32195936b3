"""Database configuration and utilities for the category admin.

This module provides a centralized way to manage database connections,
initialization, and utilities for the application.
"""

from __future__ import annotations

import logging

from flask import Flask, current_app

from .extensions import db

logger = logging.getLogger(__name__)


def _redact_uri(uri: str) -> str:
    """Hide the password portion of a database URI for logging."""
    if "@" not in uri or "://" not in uri:
        return uri
    scheme, rest = uri.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


def init_database(app: Flask) -> None:
    """Initialize the database with the Flask app.

    Configures connection pooling for server databases and creates any
    missing tables for local SQLite databases.
    """
    # Only initialize if not already done
    if "sqlalchemy" in app.extensions:
        return

    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    if not db_uri.startswith("sqlite"):
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
            "pool_pre_ping": True,
            "pool_recycle": 300,  # Recycle connections after 5 minutes
            "pool_size": 5,
            "max_overflow": 10,
        }

    try:
        db.init_app(app)

        if db_uri.startswith("sqlite"):
            with app.app_context():
                # Model modules must be imported before create_all sees their tables
                from app.auth import models as _auth_models  # noqa: F401
                from app.categories import models as _category_models  # noqa: F401

                db.create_all()
        logger.info(f"Database initialized successfully with URI: {_redact_uri(db_uri)}")
    except Exception as e:
        logger.error("Failed to initialize database: %s", e)
        raise RuntimeError(f"Failed to initialize database: {e}") from e


def create_tables() -> None:
    """Create all database tables if they don't exist."""
    with current_app.app_context():
        db.create_all()


def drop_tables() -> None:
    """Drop all database tables."""
    with current_app.app_context():
        db.drop_all()
