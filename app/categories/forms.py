"""Forms for managing categories in the admin panel."""

from typing import Any

from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField, TextAreaField
from wtforms.validators import URL, DataRequired, Length, Optional, Regexp

from app.constants.colors import DEFAULT_CATEGORY_COLOR

CATEGORY_FIELDS = ("name", "description", "image", "color", "icon")


class CategoryForm(FlaskForm):
    """Form for creating and editing a category."""

    name = StringField(
        "Name",
        validators=[
            DataRequired(message="Name is required"),
            Length(max=100, message="Name must be at most 100 characters"),
        ],
    )
    description = TextAreaField("Description", validators=[Optional()])
    image = StringField(
        "Image URL",
        validators=[Optional(), URL(message="Enter a valid URL"), Length(max=255)],
    )
    color = StringField(
        "Color",
        default=DEFAULT_CATEGORY_COLOR,
        validators=[
            Optional(),
            Regexp(r"^#(?:[0-9a-fA-F]{3}){1,2}$", message="Color must be a hex value such as #6c757d"),
        ],
    )
    icon = StringField("Icon", validators=[Optional(), Length(max=50)])
    submit = SubmitField("Save")

    def to_category_data(self) -> dict[str, Any]:
        """Return the submitted category fields without CSRF and button values."""
        return {field: getattr(self, field).data for field in CATEGORY_FIELDS}


class DeleteCategoryForm(FlaskForm):
    """Empty form that carries the CSRF token for delete buttons."""

    submit = SubmitField("Delete")
