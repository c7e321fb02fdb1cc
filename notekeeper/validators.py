"""
NoteKeeper Backend: Note Request Validator
==========================================

What:  Business-rule checks on note payloads, run before any handler.
How:   `validate_note` is a pure function of the payload; the
       `validated_note_payload` dependency wires it in front of the create
       and update routes.

Rules:
    - title and content must both be present and non-empty
    - title at most 100 characters, content at most 1000 characters

PUT /note/{id} is validated with the same rules, so an update must resend
both fields even though the service only overwrites non-empty values.
"""

from notekeeper.exceptions import BadRequestError
from notekeeper.schemas.note import NotePayload

MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 1000

REQUIRED_FIELDS_MESSAGE = "Title and content are required fields"
LENGTH_LIMIT_MESSAGE = (
    "Title should be less than 100 characters, "
    "and content should be less than 1000 characters"
)


def validate_note(payload: NotePayload) -> NotePayload:
    """
    Check a note payload and return it unchanged.

    Raises:
        BadRequestError: missing/empty field, or a field over its limit
    """
    if not payload.title or not payload.content:
        raise BadRequestError(REQUIRED_FIELDS_MESSAGE)

    if len(payload.title) > MAX_TITLE_LENGTH or len(payload.content) > MAX_CONTENT_LENGTH:
        raise BadRequestError(
            LENGTH_LIMIT_MESSAGE,
            context={
                "title_length": len(payload.title),
                "content_length": len(payload.content),
            },
        )

    return payload


async def validated_note_payload(payload: NotePayload) -> NotePayload:
    """FastAPI dependency: parse the JSON body and apply validate_note."""
    return validate_note(payload)
