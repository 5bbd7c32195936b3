"""Authentication-related service functions."""

from sqlalchemy import func, select

from app.auth.models import User
from app.extensions import db


def authenticate_user(username: str, password: str) -> User | None:
    """Return the active user matching the credentials, or None."""
    stmt = select(User).where(func.lower(User.username) == (username or "").lower().strip())
    user = db.session.scalar(stmt)
    if user is None or not user.is_active or not user.check_password(password):
        return None
    return user


def create_user(username: str, email: str, password: str, is_admin: bool = False, is_active: bool = True) -> User:
    """Create and persist a new user.

    Raises:
        ValueError: If the username or email is already taken
    """
    existing = db.session.scalar(
        select(User).where((User.username == username.lower().strip()) | (User.email == email.lower().strip()))
    )
    if existing is not None:
        raise ValueError("A user with that username or email already exists")

    user = User(username=username, email=email, is_admin=is_admin, is_active=is_active)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user
