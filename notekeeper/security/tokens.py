"""
NoteKeeper Backend: Session Token Service
=========================================

What:  Issues and verifies the signed, time-limited session tokens carried
       in the `token` cookie.
How:   HS256 JWTs via python-jose. A token embeds the user's id and
       username plus `iat` and `exp`. Nothing is stored server-side: a token
       is valid exactly when its signature checks out and `exp` is in the
       future.

Lifecycle:
    The signing secret comes from Settings and is fixed for the lifetime of
    the process. There is no rotation and no revocation list; logout only
    clears the client's cookie.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from pydantic import ValidationError as SchemaValidationError

from notekeeper.config import Settings
from notekeeper.exceptions import InvalidTokenError
from notekeeper.schemas.auth import IdentityClaims

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=1)


class TokenService:
    """
    Signs and verifies session tokens.

    Attributes:
        ttl: Default lifetime for issued tokens (1 hour unless configured)
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
    ):
        if not secret_key:
            raise ValueError("TokenService requires a non-empty secret key")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """
        Build the service from configuration.

        A missing JWT_SECRET falls back to a random per-process key so the
        service still starts in development.
        """
        secret = settings.jwt_secret
        if not secret:
            logger.warning("JWT_SECRET not set; using a random per-process signing key")
            secret = secrets.token_urlsafe(32)
        return cls(
            secret_key=secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(seconds=settings.token_ttl_seconds),
        )

    def issue(self, claims: Dict[str, Any], ttl: Optional[timedelta] = None) -> str:
        """
        Produce a signed token for the given identity.

        Args:
            claims: Must contain `id` and `username`
            ttl: Lifetime override; defaults to self.ttl

        Returns:
            Compact JWT string
        """
        issued_at = datetime.now(tz=timezone.utc)
        expires_at = issued_at + (self.ttl if ttl is None else ttl)
        to_encode = {
            "sub": str(claims["id"]),
            "id": str(claims["id"]),
            "username": claims["username"],
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> IdentityClaims:
        """
        Verify a token and return its identity claims.

        Raises:
            InvalidTokenError: bad signature, malformed token, missing
                claims, or expired. There is no grace window.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            raise InvalidTokenError(context={"reason": str(e)})

        try:
            return IdentityClaims(
                id=payload["id"],
                username=payload["username"],
                iat=payload["iat"],
                exp=payload["exp"],
            )
        except (KeyError, SchemaValidationError) as e:
            raise InvalidTokenError(context={"reason": f"missing or malformed claim: {e}"})
