"""
NoteKeeper Backend: Note Request/Response Schemas
=================================================

What:  Pydantic models defining the /note API contract.
How:   FastAPI parses request bodies into NotePayload, then the request
       validator (notekeeper.validators) applies the business rules before
       any handler runs. Responses serialize timestamps as createdAt/updatedAt.

NotePayload fields are Optional on purpose: "missing" and "empty" must both
produce the same 400 message from the validator, not a schema error.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NotePayload(BaseModel):
    """Body of POST /note and PUT /note/{id}."""
    title: Optional[str] = Field(default=None, description="Note title (max 100 characters)")
    content: Optional[str] = Field(default=None, description="Note body (max 1000 characters)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a stored note.
    Who:   Returned by GET /note (as a list), GET /note/{id}, and wrapped in
           NoteEnvelope by the mutating routes.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str
    content: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite drops the offset on reload; stored values are always UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class NoteEnvelope(BaseModel):
    """Response of create/update/delete: a confirmation plus the note."""
    message: str = Field(description="Human-readable confirmation")
    note: NoteResponse
