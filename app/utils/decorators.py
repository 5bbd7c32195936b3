"""Custom decorators for the application."""

from functools import wraps
from typing import Any, Callable, TypeVar, cast

from flask import current_app, flash, jsonify, redirect, request, url_for
from flask.typing import ResponseReturnValue
from flask_login import current_user

from app.utils.messages import FlashMessages

F = TypeVar("F", bound=Callable[..., Any])


def admin_required(func: F) -> F:
    """Decorator to ensure the current user is an admin.

    This decorator should be used after the @login_required decorator.
    API requests get a JSON 403; web requests are sent to the account page.
    """

    @wraps(func)
    def decorated_view(*args: Any, **kwargs: Any) -> ResponseReturnValue:
        if not current_user.is_authenticated or not current_user.is_admin:
            current_app.logger.warning(
                f"Non-admin access to {request.path} by {getattr(current_user, 'username', 'anonymous')}"
            )
            if request.path.startswith("/api/"):
                return jsonify({"status": "error", "message": FlashMessages.ADMIN_REQUIRED}), 403
            flash(FlashMessages.ADMIN_REQUIRED, "danger")
            return redirect(url_for("auth.account"))
        return func(*args, **kwargs)

    return cast(F, decorated_view)
