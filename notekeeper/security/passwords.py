"""
NoteKeeper Backend: Password Hashing
====================================

What:  One-way salted password hashing and verification.
How:   passlib CryptContext with the bcrypt scheme. bcrypt embeds a random
       salt and its work factor in every hash, so two hashes of the same
       password differ and old hashes keep verifying after the rounds
       setting changes.

Hashing is CPU-bound (tens to hundreds of milliseconds at 12 rounds); the
async helpers run it in Starlette's threadpool so the event loop keeps
serving other requests meanwhile.
"""

import logging

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


class PasswordHasher:
    """bcrypt hasher with a configurable work factor."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plaintext: str) -> str:
        """Hash a plaintext password."""
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Verify a plaintext password against its hash.

        passlib compares digests in constant time. A stored value that is not
        a recognizable hash verifies as False instead of raising.
        """
        try:
            return self._context.verify(plaintext, hashed)
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be identified")
            return False

    async def hash_async(self, plaintext: str) -> str:
        return await run_in_threadpool(self.hash, plaintext)

    async def verify_async(self, plaintext: str, hashed: str) -> bool:
        return await run_in_threadpool(self.verify, plaintext, hashed)
