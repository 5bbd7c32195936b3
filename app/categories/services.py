"""Category service functions.

These functions are the single place where categories are read and written;
the admin views and the JSON API both delegate to them.
"""

from __future__ import annotations

import logging
from typing import Any

from flask_sqlalchemy.pagination import Pagination
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.categories.exceptions import (
    CategoryNotFoundError,
    CategoryValidationError,
    DuplicateCategoryError,
)
from app.categories.models import Category
from app.constants.colors import DEFAULT_CATEGORY_COLOR, is_valid_hex_color
from app.extensions import db

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
MAX_PER_PAGE = 100
_OPTIONAL_TEXT_FIELDS = ("description", "image", "icon")


def _search_statement(search: str | None = None):
    stmt = select(Category)
    if search:
        stmt = stmt.where(Category.name.icontains(search.strip(), autoescape=True))
    return stmt.order_by(Category.name)


def list_categories(search: str | None = None) -> list[Category]:
    """Get all categories ordered by name, optionally filtered by a name search."""
    return list(db.session.scalars(_search_statement(search)).all())


def paginate_categories(page: int = 1, per_page: int = 20, search: str | None = None) -> Pagination:
    """Get one page of categories for the admin list."""
    return db.paginate(
        _search_statement(search),
        page=page,
        per_page=per_page,
        max_per_page=MAX_PER_PAGE,
        error_out=False,
    )


def get_category(category_id: int | str) -> Category:
    """Get a single category by ID.

    Args:
        category_id: The category ID, as an int or a numeric string taken from a URL

    Raises:
        CategoryNotFoundError: If the ID is malformed or no category has it
    """
    try:
        pk = int(category_id)
    except (TypeError, ValueError):
        raise CategoryNotFoundError(category_id)

    category = db.session.get(Category, pk)
    if category is None:
        raise CategoryNotFoundError(pk)
    return category


def find_category_by_name(name: str) -> Category | None:
    """Case-insensitive lookup of a category by name."""
    stmt = select(Category).where(func.lower(Category.name) == name.strip().lower())
    return db.session.scalar(stmt)


def _clean_category_data(data: dict[str, Any], partial: bool = False) -> dict[str, Any]:
    """Keep known columns, normalize values and validate them.

    Args:
        data: Submitted field values; unknown keys are ignored
        partial: When True, ``name`` may be omitted (updates)

    Raises:
        CategoryValidationError: If a field value is not acceptable
    """
    cleaned = Category.filter_writable(data)

    if "name" in cleaned or not partial:
        name = (cleaned.get("name") or "").strip()
        if not name:
            raise CategoryValidationError("Name is required", field="name")
        if len(name) > NAME_MAX_LENGTH:
            raise CategoryValidationError(f"Name must be at most {NAME_MAX_LENGTH} characters", field="name")
        cleaned["name"] = name

    for field in _OPTIONAL_TEXT_FIELDS:
        if field in cleaned:
            value = cleaned[field]
            cleaned[field] = value.strip() or None if isinstance(value, str) else value

    if "color" in cleaned or not partial:
        color = (cleaned.get("color") or "").strip()
        if not color:
            color = DEFAULT_CATEGORY_COLOR
        elif not is_valid_hex_color(color):
            raise CategoryValidationError("Color must be a hex value such as #6c757d", field="color")
        cleaned["color"] = color

    if "is_default" in cleaned:
        cleaned["is_default"] = bool(cleaned["is_default"])

    return cleaned


def _ensure_unique_name(name: str, exclude_id: int | None = None) -> None:
    existing = find_category_by_name(name)
    if existing is not None and existing.id != exclude_id:
        raise DuplicateCategoryError(name, existing.id)


def _commit(name: str, exclude_id: int | None = None) -> None:
    """Commit the session, translating a unique name race into a duplicate error."""
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        existing = find_category_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateCategoryError(name, existing.id)
        raise
    except SQLAlchemyError:
        db.session.rollback()
        raise


def create_category(data: dict[str, Any]) -> Category:
    """Create a new category.

    Raises:
        CategoryValidationError: If the submitted data is invalid
        DuplicateCategoryError: If another category already uses the name
    """
    cleaned = _clean_category_data(data)
    _ensure_unique_name(cleaned["name"])

    category = Category(**cleaned)
    db.session.add(category)
    _commit(cleaned["name"])

    logger.info(f"Created category {category.id} ({category.name})")
    return category


def update_category(category_id: int | str, data: dict[str, Any]) -> Category:
    """Update an existing category with the submitted fields.

    Raises:
        CategoryNotFoundError: If no category has the ID
        CategoryValidationError: If the submitted data is invalid
        DuplicateCategoryError: If another category already uses the new name
    """
    category = get_category(category_id)
    cleaned = _clean_category_data(data, partial=True)
    if "name" in cleaned:
        _ensure_unique_name(cleaned["name"], exclude_id=category.id)

    for key, value in cleaned.items():
        setattr(category, key, value)
    _commit(category.name, exclude_id=category.id)

    logger.info(f"Updated category {category.id} ({category.name})")
    return category


def delete_category(category_id: int | str) -> None:
    """Delete a category.

    Raises:
        CategoryNotFoundError: If no category has the ID
    """
    category = get_category(category_id)
    db.session.delete(category)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info(f"Deleted category {category_id}")


def ensure_default_categories() -> int:
    """Create any missing default categories.

    Returns:
        Number of categories created
    """
    from app.constants.categories import get_default_categories

    existing = {name.lower() for name in db.session.scalars(select(Category.name)).all()}
    created = 0

    for cat in get_default_categories():
        if cat["name"].lower() not in existing:
            db.session.add(Category(**cat, is_default=True))
            created += 1

    if created:
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        logger.info(f"Seeded {created} default categories")

    return created
