from __future__ import annotations

from typing import Any, Tuple

from flask import Response, current_app, jsonify, request
from flask_login import login_required
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.categories import services as category_services
from app.categories.exceptions import (
    CategoryNotFoundError,
    CategoryValidationError,
    DuplicateCategoryError,
)
from app.extensions import limiter
from app.utils.decorators import admin_required

from . import bp, validate_api_csrf
from .schemas import CategorySchema

category_schema = CategorySchema()
categories_schema = CategorySchema(many=True)


def _create_api_response(
    data: Any = None, message: str = "Success", status: str = "success", code: int = 200
) -> Tuple[Response, int]:
    """Create a standardized API response."""
    response_data = {"status": status, "message": message}
    if data is not None:
        response_data["data"] = data
    return jsonify(response_data), code


def _handle_validation_error(error: ValidationError) -> Tuple[Response, int]:
    """Handle schema validation errors consistently."""
    return (
        jsonify({"status": "error", "message": "Validation failed", "errors": error.messages}),
        400,
    )


def _handle_category_error(error: CategoryValidationError) -> Tuple[Response, int]:
    """Map service validation errors to 409 for duplicates and 400 otherwise."""
    code = 409 if isinstance(error, DuplicateCategoryError) else 400
    return jsonify({"status": "error", "message": error.message, "error": error.to_dict()}), code


def _handle_not_found(error: CategoryNotFoundError) -> Tuple[Response, int]:
    return jsonify({"status": "error", "message": str(error)}), 404


def _handle_service_error(error: Exception, operation: str) -> Tuple[Response, int]:
    """Handle database errors consistently."""
    current_app.logger.error(f"Error in {operation}: {str(error)}", exc_info=True)
    return (
        jsonify({"status": "error", "message": f"Failed to {operation}"}),
        500,
    )


def _request_json() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


# Health Check
@bp.route("/health")
def health_check() -> Response:
    """API Health Check"""
    return jsonify({"status": "healthy"})


@bp.route("/categories", methods=["GET"])
@login_required
def get_categories() -> Tuple[Response, int]:
    """Get all categories, optionally filtered by ?search=."""
    search = request.args.get("search", "", type=str).strip() or None
    try:
        categories = category_services.list_categories(search=search)
    except SQLAlchemyError as e:
        return _handle_service_error(e, "retrieve categories")
    return _create_api_response(data=categories_schema.dump(categories), message="Categories retrieved successfully")


@bp.route("/categories", methods=["POST"])
@login_required
@admin_required
@validate_api_csrf
@limiter.limit("30 per minute")
def create_category() -> Tuple[Response, int]:
    """Create a new category."""
    try:
        data = category_schema.load(_request_json())
        category = category_services.create_category(data)
    except ValidationError as e:
        return _handle_validation_error(e)
    except CategoryValidationError as e:
        return _handle_category_error(e)
    except SQLAlchemyError as e:
        return _handle_service_error(e, "create category")

    return _create_api_response(data=category_schema.dump(category), message="Category created successfully", code=201)


@bp.route("/categories/<int:category_id>", methods=["GET"])
@login_required
def get_category(category_id: int) -> Tuple[Response, int]:
    """Get a single category."""
    try:
        category = category_services.get_category(category_id)
    except CategoryNotFoundError as e:
        return _handle_not_found(e)
    return _create_api_response(data=category_schema.dump(category), message="Category retrieved successfully")


@bp.route("/categories/<int:category_id>", methods=["PUT"])
@login_required
@admin_required
@validate_api_csrf
def update_category(category_id: int) -> Tuple[Response, int]:
    """Update a category with the submitted fields."""
    try:
        data = category_schema.load(_request_json(), partial=True)
        category = category_services.update_category(category_id, data)
    except ValidationError as e:
        return _handle_validation_error(e)
    except CategoryNotFoundError as e:
        return _handle_not_found(e)
    except CategoryValidationError as e:
        return _handle_category_error(e)
    except SQLAlchemyError as e:
        return _handle_service_error(e, "update category")

    return _create_api_response(data=category_schema.dump(category), message="Category updated successfully")


@bp.route("/categories/<int:category_id>", methods=["DELETE"])
@login_required
@admin_required
@validate_api_csrf
def delete_category(category_id: int) -> Tuple[Response, int]:
    """Delete a category."""
    try:
        category_services.delete_category(category_id)
    except CategoryNotFoundError as e:
        return _handle_not_found(e)
    except SQLAlchemyError as e:
        return _handle_service_error(e, "delete category")

    return Response(status=204), 204
