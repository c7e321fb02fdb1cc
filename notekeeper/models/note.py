"""
NoteKeeper Backend: Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - UUID primary key generated in Python, so it is known before flush
    - title: at most 100 characters (enforced by the request validator first)
    - content: at most 1000 characters, stored as TEXT
    - created_at / updated_at: UTC, set to the same instant on insert;
      updated_at is refreshed by the service on every mutation
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A user-authored note.

    Lifecycle:
        1. Created by POST /note (created_at == updated_at)
        2. Mutated in place by PUT /note/{id} (updated_at bumped)
        3. Removed by DELETE /note/{id}
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(100), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Invariant: updated_at >= created_at
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def touch(self) -> None:
        """Refresh updated_at after a mutation."""
        self.updated_at = utcnow()

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title[:20]}', updated_at='{self.updated_at}')>"
