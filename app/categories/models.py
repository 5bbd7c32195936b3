"""Category model."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, func
from sqlalchemy.orm import Mapped

from app.constants.colors import DEFAULT_CATEGORY_COLOR
from app.extensions import db
from app.models.base import BaseModel


class Category(BaseModel):
    """Category managed from the admin panel.

    Attributes:
        name: Name of the category (unique, compared case-insensitively)
        description: Optional description of the category
        image: Optional image URL shown next to the category
        color: Hex color code for the category (default: #6c757d)
        icon: Optional icon identifier for the category
        is_default: Whether this category was created by the default seed
    """

    __tablename__ = "category"
    __table_args__ = {"comment": "Product categories managed by admins"}

    name: Mapped[str] = db.Column(
        db.String(100),
        unique=True,
        nullable=False,
        index=True,
        comment="Name of the category",
    )
    description: Mapped[Optional[str]] = db.Column(db.Text, nullable=True, comment="Description of the category")
    image: Mapped[Optional[str]] = db.Column(db.String(255), nullable=True, comment="Image URL for the category")
    color: Mapped[str] = db.Column(
        db.String(20),
        default=DEFAULT_CATEGORY_COLOR,
        nullable=False,
        comment="Hex color code for the category (e.g., #6c757d)",
    )
    icon: Mapped[Optional[str]] = db.Column(
        db.String(50), nullable=True, comment="Icon identifier from the icon library"
    )
    is_default: Mapped[bool] = db.Column(
        db.Boolean,
        default=False,
        nullable=False,
        comment="Whether this is a default category",
    )

    def __repr__(self) -> str:
        return f"<Category {self.name}>"


# Enforces case-insensitive name uniqueness at the database level
Index("uq_category_name_lower", func.lower(Category.name), unique=True)
