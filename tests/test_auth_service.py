"""
NoteKeeper Backend: Auth Service Unit Tests
===========================================

What:  Tests for AuthService signup and login.

What we test:
    ✅ signup stores a hash, never the plaintext
    ✅ duplicate usernames raise ConflictError, whether caught by the
       lookup or by the unique constraint at commit
    ✅ login distinguishes unknown user from wrong password
    ✅ login issues a token for the user's identity
    ✅ store failures become InternalError
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from notekeeper.exceptions import ConflictError, InternalError, UnauthenticatedError
from notekeeper.security.passwords import PasswordHasher
from notekeeper.security.tokens import TokenService
from notekeeper.services.auth_service import AuthService


def _lookup_returns(session, value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    session.execute.return_value = result


class TestSignup:

    def setup_method(self):
        self.tokens = TokenService(secret_key="unit-test-secret")
        self.service = AuthService(hasher=PasswordHasher(rounds=4), token_service=self.tokens)

    @pytest.mark.asyncio
    async def test_signup_stores_hash(self, db_session):
        user = await self.service.signup(db_session, "alice", "pw1")

        assert user.username == "alice"
        assert user.password_hash != "pw1"
        assert self.service.hasher.verify("pw1", user.password_hash)

    @pytest.mark.asyncio
    async def test_signup_duplicate_found_by_lookup(self, db_session):
        await self.service.signup(db_session, "alice", "pw1")

        with pytest.raises(ConflictError) as exc_info:
            await self.service.signup(db_session, "alice", "different")
        assert exc_info.value.message == "Username already exists"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_signup_duplicate_rejected_by_constraint(self, mock_db_session):
        """A concurrent insert that wins the race surfaces as IntegrityError at commit."""
        _lookup_returns(mock_db_session, None)
        mock_db_session.commit.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.username")
        )

        with pytest.raises(ConflictError):
            await self.service.signup(mock_db_session, "alice", "pw1")
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_signup_store_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))

        with pytest.raises(InternalError, match="database is locked"):
            await self.service.signup(mock_db_session, "alice", "pw1")


class TestLogin:

    def setup_method(self):
        self.tokens = TokenService(secret_key="unit-test-secret")
        self.service = AuthService(hasher=PasswordHasher(rounds=4), token_service=self.tokens)

    @pytest.mark.asyncio
    async def test_login_success_issues_token(self, db_session):
        created = await self.service.signup(db_session, "alice", "pw1")

        user, token = await self.service.login(db_session, "alice", "pw1")

        claims = self.tokens.verify(token)
        assert user.id == created.id
        assert claims.id == str(created.id)
        assert claims.username == "alice"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, db_session):
        with pytest.raises(UnauthenticatedError) as exc_info:
            await self.service.login(db_session, "nobody", "pw1")
        assert exc_info.value.message == "User not found"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, db_session):
        await self.service.signup(db_session, "alice", "pw1")

        with pytest.raises(UnauthenticatedError) as exc_info:
            await self.service.login(db_session, "alice", "wrong")
        assert exc_info.value.message == "Invalid password or username"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_login_store_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone away"))

        with pytest.raises(InternalError):
            await self.service.login(mock_db_session, "alice", "pw1")
