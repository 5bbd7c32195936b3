"""Custom exceptions for category operations."""

from typing import Any


class CategoryValidationError(Exception):
    """Base exception for category validation errors."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {"code": "CATEGORY_INVALID", "message": self.message, "field": self.field}


class DuplicateCategoryError(CategoryValidationError):
    """Raised when a category name is already taken by another category."""

    def __init__(self, name: str, existing_id: int):
        self.name = name
        self.existing_id = existing_id
        super().__init__(f"A category named '{name}' already exists", field="name")

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": "DUPLICATE_CATEGORY",
            "message": self.message,
            "field": self.field,
            "existing_category": {"id": self.existing_id, "name": self.name},
        }


class CategoryNotFoundError(Exception):
    """Raised when a requested category is not found."""

    def __init__(self, category_id: int | str | None = None):
        self.category_id = category_id
        message = f"Category with ID {category_id} not found" if category_id is not None else "Category not found"
        super().__init__(message)
