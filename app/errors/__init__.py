"""Error handling and custom error pages for the application."""

from __future__ import annotations

from typing import cast

from flask import Blueprint, Flask, Response, current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException, NotFound

bp = Blueprint("errors", __name__)


def init_app(app: Flask) -> None:
    """Initialize error handlers with the Flask application."""
    app.register_blueprint(bp)


def _is_api_request() -> bool:
    """Check if the request is an API request."""
    return request.path.startswith("/api/") or request.headers.get("X-Requested-With") == "XMLHttpRequest"


def _create_error_response(message: str, status_code: int) -> Response | tuple[Response, int]:
    """Create a standardized error response.

    JSON for API requests, the rendered error page for web requests.
    """
    if _is_api_request():
        response = jsonify({"status": "error", "message": message, "code": status_code})
        response.status_code = status_code
        return cast(Response, response)

    template_response = render_template("errors/error.html", message=message, status_code=status_code)
    return cast(tuple[Response, int], (template_response, status_code))


@bp.app_errorhandler(HTTPException)
def handle_http_exception(error: HTTPException) -> Response | tuple[Response, int]:
    """Handle HTTP exceptions raised by abort() and routing."""
    status_code = error.code if error.code is not None else 500
    message = error.description or "HTTP error occurred"
    # Unmatched URLs carry werkzeug's generic description
    if isinstance(error, NotFound) and message == NotFound.description:
        message = "Page not found"
    return _create_error_response(message, status_code)


@bp.app_errorhandler(Exception)
def handle_exception(error: Exception) -> Response | tuple[Response, int]:
    """Handle all unhandled exceptions."""
    current_app.logger.error(f"Unhandled exception: {str(error)}", exc_info=True)
    return _create_error_response("An unexpected error occurred", 500)
