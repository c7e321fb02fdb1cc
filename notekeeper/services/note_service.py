"""
NoteKeeper Backend: Note Service
================================

What:  CRUD over the notes table.
How:   Stateless; every method receives the request's AsyncSession.
Who:   Called by the /note route handlers after the request validator has
       accepted the payload.

Error Handling Strategy:
    Missing records (and ids that are not UUIDs at all) become
    NotFoundError. Store failures are logged and wrapped in InternalError
    carrying the driver's message.

Partial updates:
    A field is replaced only when the new value is truthy. Omitted fields and
    empty strings therefore both keep the stored value.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.exceptions import InternalError, NoteKeeperError, NotFoundError
from notekeeper.models.note import Note, utcnow
from notekeeper.schemas.note import NotePayload, NoteResponse

logger = logging.getLogger(__name__)


def _parse_note_id(note_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(note_id))
    except ValueError:
        raise NotFoundError(resource="Note", resource_id=str(note_id))


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - create_note(): insert with createdAt == updatedAt
        - list_notes(): every note, in store order
        - get_note(): single note or NotFoundError
        - update_note(): truthy-only field replacement, bumps updatedAt
        - delete_note(): remove and return the deleted snapshot
    """

    async def _load(self, db: AsyncSession, note_id: str) -> Note:
        parsed_id = _parse_note_id(note_id)
        result = await db.execute(select(Note).where(Note.id == parsed_id))
        note = result.scalar_one_or_none()
        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return note

    async def create_note(self, db: AsyncSession, payload: NotePayload) -> NoteResponse:
        try:
            now = utcnow()
            note = Note(
                title=payload.title,
                content=payload.content,
                created_at=now,
                updated_at=now,
            )
            db.add(note)
            await db.commit()
            logger.info("Note created: %s", note.id)
            return NoteResponse.model_validate(note)

        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise InternalError(str(e), context={"error_type": type(e).__name__})

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        try:
            result = await db.execute(select(Note))
            return [NoteResponse.model_validate(note) for note in result.scalars().all()]

        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise InternalError(str(e), context={"error_type": type(e).__name__})

    async def get_note(self, db: AsyncSession, note_id: str) -> NoteResponse:
        """
        Retrieve a single note by ID.

        Raises:
            NotFoundError: no note with that id, or the id is not a UUID (→ 404)
            InternalError: query execution failed (→ 500)
        """
        try:
            note = await self._load(db, note_id)
            return NoteResponse.model_validate(note)

        except NoteKeeperError:
            raise
        except Exception as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise InternalError(str(e), context={"note_id": str(note_id)})

    async def update_note(
        self, db: AsyncSession, note_id: str, payload: NotePayload
    ) -> NoteResponse:
        """
        Overwrite the provided non-empty fields and bump updated_at.

        Raises:
            NotFoundError: no note with that id (→ 404)
            InternalError: store failure (→ 500)
        """
        try:
            note = await self._load(db, note_id)
            note.title = payload.title or note.title
            note.content = payload.content or note.content
            note.touch()
            await db.commit()
            logger.info("Note updated: %s", note.id)
            return NoteResponse.model_validate(note)

        except NoteKeeperError:
            raise
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise InternalError(str(e), context={"note_id": str(note_id)})

    async def delete_note(self, db: AsyncSession, note_id: str) -> NoteResponse:
        """Delete a note and return what it looked like just before removal."""
        try:
            note = await self._load(db, note_id)
            snapshot = NoteResponse.model_validate(note)
            await db.delete(note)
            await db.commit()
            logger.info("Note deleted: %s", snapshot.id)
            return snapshot

        except NoteKeeperError:
            raise
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise InternalError(str(e), context={"note_id": str(note_id)})


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
