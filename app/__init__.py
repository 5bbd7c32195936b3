import logging
import os

from dotenv import load_dotenv
from flask import Flask, Response, redirect, url_for
from flask_cors import CORS

from config import get_config

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

__all__ = ["create_app"]


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name ("development", "testing", "production").
                     Defaults to the FLASK_ENV environment variable.
    Returns:
        Flask: The configured Flask application instance.
    """
    config = get_config(config_name)

    app = Flask(__name__)
    app.config.from_object(config)

    _configure_request_handlers(app)
    _configure_app_settings(app)
    _configure_logging(app)
    _initialize_components(app)
    _initialize_admin_and_cli(app)

    return app


def _configure_request_handlers(app: Flask) -> None:
    """Configure request and response handlers."""

    @app.after_request
    def add_security_headers(response: Response) -> Response:
        content_type = response.headers.get("Content-Type", "")
        _set_security_headers(response, content_type)
        if "html" in content_type:
            response.headers["Cache-Control"] = "no-cache, max-age=0, must-revalidate"
        return response

    @app.route("/")
    def index() -> Response:
        return redirect(url_for("admin.list_categories"))  # type: ignore[return-value]


def _set_security_headers(response: Response, content_type: str) -> None:
    """Set security headers for responses."""
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

    # Content Security Policy - only for HTML responses
    if content_type and "html" in content_type:
        csp = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
            "script-src 'self' https://cdn.jsdelivr.net; "
            "img-src 'self' data: https:; "
            "frame-ancestors 'none'; "
            "object-src 'none'; "
            "base-uri 'self';"
        )
        response.headers["Content-Security-Policy"] = csp


def _configure_app_settings(app: Flask) -> None:
    """Configure basic application settings and validation."""
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise ValueError("SQLALCHEMY_DATABASE_URI is not configured")

    app.config.setdefault("SQLALCHEMY_TRACK_MODIFICATIONS", False)


def _configure_logging(app: Flask) -> None:
    """Configure application logging."""
    log_level = logging.DEBUG if app.debug else logging.INFO
    logger.setLevel(log_level)
    logging.getLogger("app").setLevel(log_level)
    app.logger.setLevel(log_level)

    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    logger.debug("Application configuration:")
    logger.debug(f"- ENV: {os.getenv('FLASK_ENV', 'Not set')}")
    logger.debug(f"- DEBUG: {app.debug}")
    logger.debug(f"- TESTING: {app.testing}")


def _initialize_components(app: Flask) -> None:
    """Initialize core application components."""
    from .database import init_database
    from .extensions import init_app as init_extensions

    init_extensions(app)
    init_database(app)

    _register_blueprints(app)

    from .errors import init_app as init_errors

    init_errors(app)
    logger.debug("Registered error handlers")

    from .template_filters import init_app as init_template_filters

    init_template_filters(app)

    from .utils.context_processors import inject_color_data, inject_user_context

    app.context_processor(inject_user_context)
    app.context_processor(inject_color_data)
    logger.debug("Template filters and context processors initialized")

    _configure_cors(app)
    _log_registered_routes(app)


def _initialize_admin_and_cli(app: Flask) -> None:
    """Initialize admin module and CLI commands."""
    from . import admin

    admin.init_app(app)

    from .categories.cli import register_commands as register_category_commands
    from .cli import register_commands as register_app_commands

    register_category_commands(app)
    register_app_commands(app)
    logger.debug("Initialized CLI commands")


def _register_blueprints(app: Flask) -> None:
    """Register all application blueprints."""
    logger.debug("Registering blueprints...")

    from .auth import init_app as init_auth

    init_auth(app)
    logger.debug("Registered auth blueprint at /auth")

    from .api import bp as api_bp

    app.register_blueprint(api_bp, url_prefix="/api/v1")
    logger.debug(f"Registered blueprint: {api_bp.name} at /api/v1")


def _configure_cors(app: Flask) -> None:
    """Configure CORS for the JSON API."""
    cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
    cors_methods = os.getenv("CORS_METHODS", "GET,POST,PUT,DELETE,OPTIONS").split(",")
    cors_allow_headers = os.getenv("CORS_ALLOW_HEADERS", "Content-Type,X-CSRFToken,X-Requested-With").split(",")

    CORS(
        app,
        resources={
            r"/api/*": {
                "origins": cors_origins,
                "methods": cors_methods,
                "allow_headers": cors_allow_headers,
                "expose_headers": ["Content-Length", "X-CSRFToken"],
                "supports_credentials": False,
            }
        },
    )


def _log_registered_routes(app: Flask) -> None:
    """Log all registered routes for debugging."""
    logger.debug("Registered routes:")
    for rule in app.url_map.iter_rules():
        methods = list((rule.methods or set()) - {"OPTIONS", "HEAD"})
        logger.debug(f"  {rule.endpoint}: {rule.rule} {methods}")
