"""Base model class with SQLAlchemy type hints."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, cast

from flask_sqlalchemy.model import DefaultMeta
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from ..extensions import db as _db

if TYPE_CHECKING:
    Model = _db.Model
else:
    Model = cast(DefaultMeta, _db.Model)

# Columns managed by the database, never assigned from user input
PROTECTED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


class BaseModel(Model):  # type: ignore
    """Base model class with common fields for all models.

    Provides an integer primary key plus creation and modification timestamps.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        _db.DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="Timestamp when the record was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        _db.DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="Timestamp when the record was last updated",
    )

    @classmethod
    def writable_columns(cls) -> set[str]:
        """Names of the columns that may be set from submitted data."""
        return {c.name for c in cls.__table__.columns} - PROTECTED_COLUMNS

    @classmethod
    def filter_writable(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Drop keys that are not writable columns of this model."""
        writable = cls.writable_columns()
        return {k: v for k, v in data.items() if k in writable}
