"""Admin panel module for category management."""

from flask import Flask

from .routes import bp as admin_bp


def init_app(app: Flask) -> None:
    """Initialize the admin module with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(admin_bp)

    app.logger.debug("Admin module initialized")


__all__ = [
    "init_app",
    "admin_bp",
]
