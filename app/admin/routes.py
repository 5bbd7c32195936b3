"""Admin routes for managing categories.

The edit view reads the category ID from the URL, loads the category and
renders it into the form. Submitting the form creates or updates the
category through the category services and then redirects back to the
category list.
"""

from typing import cast

from flask import (
    Blueprint,
    Response,
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)
from flask.typing import ResponseReturnValue
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from app.categories import services as category_services
from app.categories.exceptions import CategoryNotFoundError, CategoryValidationError
from app.categories.forms import CategoryForm, DeleteCategoryForm
from app.categories.models import Category
from app.utils.decorators import admin_required
from app.utils.messages import FlashMessages

bp = Blueprint("admin", __name__, url_prefix="/admin")


def _redirect_to_list() -> Response:
    return cast(Response, redirect(url_for("admin.list_categories")))


def _load_category_or_404(category_id: int) -> Category:
    """Load the category named in the URL, aborting with 404 when it is missing."""
    try:
        return category_services.get_category(category_id)
    except CategoryNotFoundError as e:
        current_app.logger.info(str(e))
        abort(404, FlashMessages.CATEGORY_NOT_FOUND)


def _render_category_form(form: CategoryForm, category: Category | None = None) -> str:
    return render_template(
        "admin/category_form.html",
        title=f"Edit {category.name}" if category else "New Category",
        form=form,
        category=category,
        is_edit=category is not None,
        delete_form=DeleteCategoryForm() if category else None,
    )


def _apply_validation_error(form: CategoryForm, error: CategoryValidationError) -> None:
    """Attach a service validation error to the matching form field."""
    field = getattr(form, error.field, None) if error.field else None
    if field is not None:
        field.errors = list(field.errors) + [error.message]
    else:
        flash(error.message, "danger")


@bp.route("/")
@login_required
@admin_required
def dashboard() -> Response:
    """The admin panel opens on the category list."""
    return _redirect_to_list()


@bp.route("/categories")
@login_required
@admin_required
def list_categories() -> str:
    """List categories with an optional name search."""
    page = request.args.get("page", 1, type=int)
    per_page = request.args.get("per_page", current_app.config.get("CATEGORIES_PER_PAGE", 20), type=int)
    search = request.args.get("search", "", type=str).strip()

    categories = category_services.paginate_categories(page=page, per_page=per_page, search=search or None)

    return render_template(
        "admin/categories.html",
        title="Categories",
        categories=categories,
        search=search,
        delete_form=DeleteCategoryForm(),
    )


@bp.route("/categories/new", methods=["GET", "POST"])
@login_required
@admin_required
def create_category() -> ResponseReturnValue:
    """Show the blank category form and create the category on submit."""
    form = CategoryForm()

    if form.validate_on_submit():
        try:
            category = category_services.create_category(form.to_category_data())
        except CategoryValidationError as e:
            _apply_validation_error(form, e)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Database error creating category: {e}", exc_info=True)
            flash(FlashMessages.CATEGORY_SAVE_ERROR, "danger")
        else:
            current_app.logger.info(f"Admin created category {category.id}")
            flash(FlashMessages.CATEGORY_ADDED, "success")
            return _redirect_to_list()

    return _render_category_form(form)


@bp.route("/categories/<int:category_id>", methods=["GET", "POST"])
@login_required
@admin_required
def edit_category(category_id: int) -> ResponseReturnValue:
    """Load the category from the URL and update it on submit."""
    category = _load_category_or_404(category_id)

    if request.method == "GET":
        return _render_category_form(CategoryForm(obj=category), category)

    form = CategoryForm()
    if form.validate_on_submit():
        try:
            category_services.update_category(category.id, form.to_category_data())
        except CategoryNotFoundError:
            abort(404, FlashMessages.CATEGORY_NOT_FOUND)
        except CategoryValidationError as e:
            _apply_validation_error(form, e)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Database error updating category {category.id}: {e}", exc_info=True)
            flash(FlashMessages.CATEGORY_SAVE_ERROR, "danger")
        else:
            flash(FlashMessages.CATEGORY_UPDATED, "success")
            return _redirect_to_list()

    return _render_category_form(form, category)


@bp.route("/categories/<int:category_id>/delete", methods=["POST"])
@login_required
@admin_required
def delete_category(category_id: int) -> Response:
    """Delete a category and return to the list."""
    form = DeleteCategoryForm()
    if not form.validate_on_submit():
        abort(400)

    try:
        category_services.delete_category(category_id)
    except CategoryNotFoundError:
        abort(404, FlashMessages.CATEGORY_NOT_FOUND)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Database error deleting category {category_id}: {e}", exc_info=True)
        flash(FlashMessages.CATEGORY_DELETE_ERROR, "danger")
        return _redirect_to_list()

    flash(FlashMessages.CATEGORY_DELETED, "success")
    return _redirect_to_list()
