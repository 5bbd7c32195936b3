"""Authentication package initialization."""

import logging
from typing import TYPE_CHECKING

from flask import Blueprint

if TYPE_CHECKING:
    from flask import Flask

bp = Blueprint("auth", __name__, url_prefix="/auth")

logger = logging.getLogger(__name__)


def init_app(app: "Flask") -> None:
    """Initialize the auth blueprint with the Flask app.

    Args:
        app: The Flask application instance
    """
    # Import routes after blueprint creation to avoid circular imports
    from . import cli  # noqa: F401
    from . import routes  # noqa: F401
    from .models import User  # noqa: F401

    app.register_blueprint(bp)

    cli.register_commands(app)
    logger.debug("Auth blueprint registered")
