"""Context processors for Flask application.

This module provides context processors that make data available
to all templates globally.
"""

from flask import current_app
from flask_login import current_user


def inject_user_context():
    """Inject current user context into all templates."""
    return {
        "current_user": current_user,
        "app_name": current_app.config.get("APP_NAME", "category-admin"),
    }


def inject_color_data():
    """Inject the category colour palette for the form's colour picker."""
    from app.constants import get_color_choices

    return {"color_choices": get_color_choices()}
