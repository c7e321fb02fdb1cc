"""
NoteKeeper Backend: Auth Route Handlers
=======================================

What:  POST /signup, POST /login, POST /logout, GET /profile.
How:   Thin handlers: parse the body, call AuthService, set or clear the
       session cookie, shape the JSON response.

Session cookie:
    name `token`, HttpOnly, SameSite from settings (lax by default),
    Secure when settings.cookie_secure is set, max-age = token TTL.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.database import get_db_session
from notekeeper.schemas.auth import (
    CredentialsRequest,
    IdentityClaims,
    LoginResponse,
    ProfileResponse,
    UserPublic,
)
from notekeeper.schemas.common import ErrorResponse, MessageResponse
from notekeeper.security.dependencies import SESSION_COOKIE, require_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/signup",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Username already exists", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def signup(
    payload: CredentialsRequest,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Create an account. No session token is issued; call /login next."""
    auth_service = request.app.state.auth_service
    await auth_service.signup(db, payload.username, payload.password)
    return MessageResponse(message="User created successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"description": "User not found, or invalid password", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Log in and receive a session cookie",
)
async def login(
    payload: CredentialsRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    """
    Verify credentials and set the `token` cookie.

    The response body carries the user's id and username only; the token
    itself travels in the HttpOnly cookie.
    """
    auth_service = request.app.state.auth_service
    settings = request.app.state.settings

    user, token = await auth_service.login(db, payload.username, payload.password)

    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        max_age=int(auth_service.token_service.ttl.total_seconds()),
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return LoginResponse(user=UserPublic(id=str(user.id), username=user.username))


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Clear the session cookie",
)
async def logout(request: Request, response: Response) -> MessageResponse:
    """
    Clear the `token` cookie unconditionally.

    Tokens are stateless, so a copy of the token kept elsewhere stays valid
    until it expires.
    """
    settings = request.app.state.settings
    response.delete_cookie(
        key=SESSION_COOKIE,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    logger.info("Session cookie cleared")
    return MessageResponse(message="Logout successful")


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
    summary="Return the authenticated identity",
)
async def profile(user: IdentityClaims = Depends(require_user)) -> ProfileResponse:
    return ProfileResponse(user=user)
