"""
NoteKeeper Backend: User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` table.
Who:   Read and written only by AuthService.

The UNIQUE constraint on username is the authoritative duplicate check.
Concurrent signups for one username both pass the service's existence
lookup; the constraint rejects the second insert and AuthService reports
it as a ConflictError.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.database import Base
from notekeeper.models.note import utcnow


class User(Base):
    """
    A registered account. Created at signup, read at login, never updated.

    password_hash is never serialized into an API response.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(String(150), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
