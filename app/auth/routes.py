from urllib.parse import urlparse

from flask import current_app, flash, redirect, render_template, request, session, url_for
from flask_login import current_user, login_required, login_user, logout_user

from app.auth import bp, services
from app.extensions import limiter
from app.utils.messages import FlashMessages

from .forms import LoginForm


def _is_local_path(path: str) -> bool:
    # "//host" and "/\host" are read by browsers as protocol-relative URLs
    return path.startswith("/") and not path.startswith(("//", "/\\"))


def _safe_next_page(next_page: str | None) -> str:
    """Only allow redirects to local paths after login."""
    default = url_for("admin.list_categories")
    if not next_page:
        return default
    if next_page.startswith("http"):
        next_page = urlparse(next_page).path
    if not _is_local_path(next_page):
        return default
    return next_page


@bp.route("/login", methods=["GET", "POST"])
@limiter.limit("10 per minute", methods=["POST"])
def login():
    """Handle user login with standard Flask-Login patterns."""
    if current_user.is_authenticated:
        return redirect(_safe_next_page(request.args.get("next")))

    form = LoginForm()

    if form.validate_on_submit():
        user = services.authenticate_user(form.username.data, form.password.data)

        if user is not None:
            login_user(user, remember=form.remember_me.data)
            session.permanent = True
            current_app.logger.info(f"User {user.username} logged in")
            flash(FlashMessages.LOGIN_SUCCESS, "success")
            return redirect(_safe_next_page(form.next.data or request.args.get("next")))

        current_app.logger.warning(f"Failed login attempt for {form.username.data!r}")
        flash(FlashMessages.LOGIN_ERROR, "error")

    if not form.next.data:
        form.next.data = request.args.get("next", "")

    return render_template("auth/login.html", form=form, title="Login")


@bp.route("/logout")
@login_required
def logout():
    logout_user()
    flash(FlashMessages.LOGOUT_SUCCESS, "info")
    return redirect(url_for("auth.login"))


@bp.route("/account")
@login_required
def account():
    """Landing page for signed-in users who cannot manage categories."""
    return render_template("auth/account.html", title="Account")
