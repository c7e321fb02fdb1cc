"""
NoteKeeper Backend: Notes Route Handlers
========================================

What:  CRUD endpoints under /note.
How:   The request validator runs as a dependency on create and update;
       handlers delegate to NoteService and wrap the result.

Access:
    The router carries the note_access dependency. It is a no-op unless
    settings.notes_require_auth is enabled, in which case every /note route
    requires the same session cookie as /profile.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.database import get_db_session
from notekeeper.schemas.common import ErrorResponse
from notekeeper.schemas.note import NoteEnvelope, NotePayload, NoteResponse
from notekeeper.security.dependencies import note_access
from notekeeper.services.note_service import note_service
from notekeeper.validators import validated_note_payload

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/note",
    tags=["Notes"],
    dependencies=[Depends(note_access)],
)

_not_found = {404: {"description": "Note not found", "model": ErrorResponse}}
_server_error = {500: {"description": "Server error", "model": ErrorResponse}}
_bad_request = {400: {"description": "Missing or oversized title/content", "model": ErrorResponse}}


@router.post(
    "",
    status_code=201,
    response_model=NoteEnvelope,
    responses={**_bad_request, **_server_error},
    summary="Create a new note",
)
async def create_note(
    payload: NotePayload = Depends(validated_note_payload),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.create_note(db, payload)
    return NoteEnvelope(message="Note created successfully", note=note)


@router.get(
    "",
    response_model=List[NoteResponse],
    responses=_server_error,
    summary="Get all notes",
)
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> List[NoteResponse]:
    """Every stored note; no filtering, pagination or ordering guarantee."""
    return await note_service.list_notes(db)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_not_found, **_server_error},
    summary="Get a specific note by ID",
)
async def get_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.put(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses={**_bad_request, **_not_found, **_server_error},
    summary="Update a specific note by ID",
)
async def update_note(
    note_id: str,
    payload: NotePayload = Depends(validated_note_payload),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.update_note(db, note_id, payload)
    return NoteEnvelope(message="Note updated successfully", note=note)


@router.delete(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses={**_not_found, **_server_error},
    summary="Delete a specific note by ID",
)
async def delete_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> NoteEnvelope:
    note = await note_service.delete_note(db, note_id)
    return NoteEnvelope(message="Note deleted successfully", note=note)
