"""
NoteKeeper Backend: Auth Gate
=============================

What:  FastAPI dependencies that enforce a valid session cookie.

Contract (require_user):
    1. Read the `token` cookie
    2. Absent   → 401 "Unauthorized: No token provided"
    3. Invalid  → 401 "Unauthorized: Invalid token" (bad signature, expired, ...)
    4. Valid    → claims stored on request.state.user and returned

Applied to:
    - GET /profile, always
    - /note routes only when settings.notes_require_auth is true (see
      note_access); by default note routes are open
"""

import logging

from fastapi import Request

from notekeeper.exceptions import InvalidTokenError, UnauthenticatedError
from notekeeper.schemas.auth import IdentityClaims

logger = logging.getLogger(__name__)

SESSION_COOKIE = "token"


async def require_user(request: Request) -> IdentityClaims:
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        raise UnauthenticatedError("Unauthorized: No token provided")

    token_service = request.app.state.token_service
    try:
        claims = token_service.verify(token)
    except InvalidTokenError as e:
        logger.info("Rejected session token: %s", e.context.get("reason", "unknown"))
        raise UnauthenticatedError("Unauthorized: Invalid token")

    request.state.user = claims
    return claims


async def note_access(request: Request) -> None:
    """Router-level gate for /note; enforces require_user only when configured."""
    if request.app.state.settings.notes_require_auth:
        await require_user(request)
