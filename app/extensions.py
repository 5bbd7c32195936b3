"""Application Flask extensions.

This module initializes and configures all Flask extensions used in the application.
"""

import logging
import os
from typing import Any, cast

from flask import Flask, flash, jsonify, redirect, request, url_for
from flask.wrappers import Response
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFError, CSRFProtect, generate_csrf

logger = logging.getLogger(__name__)

# Development fallback secret key (only used when SECRET_KEY env var is not set)
_DEV_FALLBACK_SECRET = "dev-key-change-in-production"  # nosec B105

db = SQLAlchemy()

login_manager = LoginManager()
login_manager.login_view = "auth.login"

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["400 per day", "100 per hour"],
)

csrf = CSRFProtect()

migrate = Migrate()


def _is_api_request() -> bool:
    return request.path.startswith("/api/") or request.headers.get("X-Requested-With") == "XMLHttpRequest"


def _configure_csrf_handlers(app: Flask) -> None:
    """Configure CSRF response headers and error handlers."""
    if not app.config.get("WTF_CSRF_ENABLED", True):
        return

    @app.after_request
    def add_csrf_headers(response: Response) -> Response:
        response.headers.set("X-CSRFToken", generate_csrf())
        return response

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e: CSRFError) -> Response:
        app.logger.warning(f"CSRF error: {e} - Path: {request.path} - Method: {request.method}")
        message = "The CSRF session token is missing or invalid."

        if _is_api_request():
            response = jsonify({"status": "error", "message": message, "error_type": "csrf_validation_failed"})
            response.status_code = 403
            return cast(Response, response)

        flash(message, "error")
        return cast(Response, redirect(request.referrer or url_for("admin.list_categories")))


def _configure_migration_directory(app: Flask) -> None:
    """Point Flask-Migrate at the repository level migrations directory."""
    migration_dir = os.environ.get("MIGRATIONS_DIR") or os.path.join(
        os.path.dirname(os.path.dirname(__file__)), "migrations"
    )
    migrate.init_app(app, db, directory=migration_dir)


def init_app(app: Flask) -> None:
    """Initialize all extensions with the Flask application."""
    login_manager.init_app(app)
    _configure_migration_directory(app)
    limiter.init_app(app)

    if not app.config.get("SECRET_KEY"):
        app.logger.warning("Using fallback secret key - ensure SECRET_KEY is set in production")
        app.config["SECRET_KEY"] = os.getenv("SECRET_KEY") or _DEV_FALLBACK_SECRET

    app.config.setdefault("WTF_CSRF_ENABLED", True)
    app.config.setdefault("WTF_CSRF_SSL_STRICT", False)
    # API blueprints validate the X-CSRFToken header themselves
    app.config.setdefault("WTF_CSRF_CHECK_DEFAULT", False)
    csrf.init_app(app)

    _configure_csrf_handlers(app)
    app.logger.debug("Extensions initialized")


def _handle_api_unauthorized() -> Response:
    """Handle unauthorized API requests."""
    response = jsonify({"status": "error", "message": "Authentication required", "code": 401})
    response.status_code = 401
    return cast(Response, response)


@login_manager.unauthorized_handler
def unauthorized() -> Response:
    """Handle unauthorized requests.

    For API requests, return a 401 JSON response.
    For web requests, redirect to the login page.
    """
    if request.path.startswith("/api/"):
        return _handle_api_unauthorized()

    return cast(Response, redirect(url_for(login_manager.login_view, next=request.path)))


@login_manager.user_loader
def load_user(user_id: str) -> Any | None:
    """Load a user from the database.

    Only returns active users. Inactive users are treated as non-existent
    to prevent access after account deactivation.
    """
    from app.auth.models import User

    if not user_id or not user_id.isdigit():
        return None

    user = db.session.get(User, int(user_id))
    if user and user.is_active:
        return user

    return None
