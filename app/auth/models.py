from __future__ import annotations

from typing import Any, Dict, Optional

from flask_login import UserMixin
from sqlalchemy import Connection, event
from sqlalchemy.orm import Mapped, Mapper
from werkzeug.security import check_password_hash, generate_password_hash

from app.extensions import db
from app.models.base import BaseModel


class User(BaseModel, UserMixin):
    """User model for authentication and authorization.

    Attributes:
        username: Unique username for the user
        email: Unique email address for the user
        password_hash: Hashed password (never store plaintext passwords!)
        is_active: Whether the user account is active
        is_admin: Whether the user may manage the admin panel
    """

    __tablename__ = "user"

    username: Mapped[str] = db.Column(
        db.String(64),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique username",
    )
    email: Mapped[str] = db.Column(
        db.String(120),
        unique=True,
        nullable=False,
        index=True,
        comment="User's email address",
    )
    password_hash: Mapped[Optional[str]] = db.Column(db.String(256), nullable=True, comment="Hashed password")

    is_active: Mapped[bool] = db.Column(
        db.Boolean,
        default=True,
        nullable=False,
        comment="Whether the user account is active",
    )
    is_admin: Mapped[bool] = db.Column(
        db.Boolean,
        default=False,
        nullable=False,
        comment="Whether the user has admin privileges",
    )

    def set_password(self, password: str) -> None:
        """Set the user's password.

        Args:
            password: The plaintext password to hash and store

        Raises:
            ValueError: If password is empty or None
        """
        if not password:
            raise ValueError("Password cannot be empty")

        self.password_hash = generate_password_hash(password, method="pbkdf2:sha256", salt_length=16)

    def check_password(self, password: str) -> bool:
        """Check if the provided password matches the stored hash.

        Returns False if the user has no password set.
        """
        if not password or not self.password_hash:
            return False

        return check_password_hash(self.password_hash, password)

    def get_id(self) -> str:
        """Return the user ID as a string for Flask-Login."""
        return str(self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation of the user without the password hash."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "is_active": self.is_active,
            "is_admin": self.is_admin,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"


@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def normalize_user(mapper: Mapper, connection: Connection, target: User) -> None:
    """Lowercase username and email before they are written."""
    if target.username:
        target.username = target.username.lower().strip()

    if target.email:
        target.email = target.email.lower().strip()
