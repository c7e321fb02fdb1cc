"""
NoteKeeper Backend: Auth Service
================================

What:  Signup and login orchestration over the users table, the password
       hasher and the token service.
Who:   Called by the /signup and /login route handlers. Logout and profile
       need no service: one clears a cookie, the other echoes token claims.

Error Handling Strategy:
    Application exceptions (ConflictError, UnauthenticatedError) propagate
    as-is. Anything else (driver errors, hashing failures) is logged and
    wrapped in InternalError with the original error text.
"""

import logging
from typing import Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.exceptions import (
    ConflictError,
    InternalError,
    NoteKeeperError,
    UnauthenticatedError,
)
from notekeeper.models.user import User
from notekeeper.security.passwords import PasswordHasher
from notekeeper.security.tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """
    Business logic for account creation and credential checks.

    Built once by create_app() with the process-wide hasher and token
    service; holds no per-request state.
    """

    def __init__(self, hasher: PasswordHasher, token_service: TokenService):
        self.hasher = hasher
        self.token_service = token_service

    async def _find_user(self, db: AsyncSession, username: str) -> User | None:
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def signup(self, db: AsyncSession, username: str, password: str) -> User:
        """
        Create a new user.

        Workflow:
            1. Look up the username (fast path for the common duplicate case)
            2. Hash the password
            3. Insert and commit; the UNIQUE constraint decides races

        Raises:
            ConflictError: username already exists (→ 400)
            InternalError: store or hashing failure (→ 500)
        """
        try:
            if await self._find_user(db, username) is not None:
                raise ConflictError(context={"username": username})

            password_hash = await self.hasher.hash_async(password)
            user = User(username=username, password_hash=password_hash)
            db.add(user)
            try:
                await db.commit()
            except IntegrityError:
                # A concurrent signup inserted the same username first
                await db.rollback()
                logger.info("Signup lost unique-constraint race for %r", username)
                raise ConflictError(context={"username": username})

            logger.info("User created: %s (%s)", username, user.id)
            return user

        except NoteKeeperError:
            raise
        except Exception as e:
            logger.error("Signup failed for %r: %s", username, str(e), exc_info=True)
            raise InternalError(str(e), context={"error_type": type(e).__name__})

    async def login(self, db: AsyncSession, username: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and issue a session token.

        Returns:
            (user, token) where token expires after the service's TTL (1 hour)

        Raises:
            UnauthenticatedError: "User not found" or
                "Invalid password or username" (→ 401)
            InternalError: store failure (→ 500)
        """
        try:
            user = await self._find_user(db, username)
            if user is None:
                logger.warning("Login failed: unknown user %r", username)
                raise UnauthenticatedError("User not found")

            if not await self.hasher.verify_async(password, user.password_hash):
                logger.warning("Login failed: wrong password for %r", username)
                raise UnauthenticatedError("Invalid password or username")

            token = self.token_service.issue({"id": str(user.id), "username": user.username})
            logger.info("User logged in: %s", username)
            return user, token

        except NoteKeeperError:
            raise
        except Exception as e:
            logger.error("Login failed for %r: %s", username, str(e), exc_info=True)
            raise InternalError(str(e), context={"error_type": type(e).__name__})
