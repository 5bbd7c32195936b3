"""JSON API for categories, mounted at /api/v1.

Write endpoints are called from scripts and from pages served by this app,
so they take the CSRF token from the ``X-CSRFToken`` response header and
send it back in the same request header.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue
from flask_wtf.csrf import CSRFError, validate_csrf
from wtforms.validators import ValidationError

bp = Blueprint("api", __name__)

F = TypeVar("F", bound=Callable[..., Any])

CSRF_HEADER = "X-CSRFToken"


def _csrf_rejected(message: str, error_type: str) -> ResponseReturnValue:
    return jsonify({"status": "error", "message": message, "error_type": error_type}), 403


def validate_api_csrf(f: F) -> F:
    """Require a valid CSRF token header on category write requests.

    Safe methods pass through, as does everything when ``WTF_CSRF_ENABLED``
    is off (the test configuration).
    """

    @wraps(f)
    def decorated_function(*args: Any, **kwargs: Any) -> Any:
        if not current_app.config.get("WTF_CSRF_ENABLED", True) or request.method in ("GET", "HEAD", "OPTIONS"):
            return f(*args, **kwargs)

        csrf_token = request.headers.get(CSRF_HEADER)
        if not csrf_token:
            return _csrf_rejected(f"Category changes need the {CSRF_HEADER} header", "csrf_missing")

        try:
            validate_csrf(csrf_token)
        except (ValidationError, CSRFError) as e:
            current_app.logger.warning(f"Rejected {request.method} {request.path}: {e}")
            return _csrf_rejected("CSRF token is invalid or expired; reload and try again", "csrf_invalid")

        return f(*args, **kwargs)

    return cast(F, decorated_function)


from . import routes  # noqa: E402, F401
