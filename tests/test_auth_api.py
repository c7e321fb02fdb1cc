"""
NoteKeeper Backend: Auth Endpoint Tests
=======================================

What:  HTTP-level tests for /signup, /login, /logout and /profile.
How:   In-process AsyncClient against an app backed by a fresh SQLite file.
"""

from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from notekeeper.security.tokens import TokenService


async def _signup_and_login(client, credentials):
    await client.post("/signup", json=credentials)
    return await client.post("/login", json=credentials)


class TestSignup:

    @pytest.mark.asyncio
    async def test_signup_created(self, test_client, credentials):
        response = await test_client.post("/signup", json=credentials)

        assert response.status_code == 201
        assert response.json() == {"message": "User created successfully"}
        assert "token" not in response.cookies

    @pytest.mark.asyncio
    async def test_signup_duplicate_username(self, test_client, credentials):
        await test_client.post("/signup", json=credentials)

        response = await test_client.post(
            "/signup", json={"username": credentials["username"], "password": "another"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Username already exists"

    @pytest.mark.asyncio
    async def test_signup_missing_password(self, test_client):
        response = await test_client.post("/signup", json={"username": "alice"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "bad_request"
        assert "password" in body["message"]

    @pytest.mark.asyncio
    async def test_signup_empty_password_rejected(self, test_client):
        response = await test_client.post("/signup", json={"username": "alice", "password": ""})

        assert response.status_code == 400
        assert "password" in response.json()["message"]
        login = await test_client.post("/login", json={"username": "alice", "password": "x"})
        assert login.json()["message"] == "User not found"


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_sets_http_only_cookie(self, app, test_client, credentials):
        response = await _signup_and_login(test_client, credentials)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["username"] == "alice"
        assert set(body["user"]) == {"id", "username"}

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("token=")
        assert "httponly" in set_cookie.lower()
        assert "samesite=lax" in set_cookie.lower()

        claims = app.state.token_service.verify(response.cookies["token"])
        assert claims.id == body["user"]["id"]

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, test_client):
        response = await test_client.post("/login", json={"username": "ghost", "password": "pw"})

        assert response.status_code == 401
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, test_client, credentials):
        await test_client.post("/signup", json=credentials)

        response = await test_client.post(
            "/login", json={"username": credentials["username"], "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid password or username"
        assert "token" not in response.cookies

    @pytest.mark.asyncio
    async def test_password_hash_never_returned(self, test_client, credentials):
        response = await _signup_and_login(test_client, credentials)
        assert "password" not in response.text.lower()


class TestProfile:

    @pytest.mark.asyncio
    async def test_profile_without_cookie(self, test_client):
        response = await test_client.get("/profile")

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: No token provided"

    @pytest.mark.asyncio
    async def test_profile_with_tampered_cookie(self, app, test_client, credentials):
        login = await _signup_and_login(test_client, credentials)
        header, _, signature = login.cookies["token"].split(".")
        forged = TokenService(secret_key="attacker").issue({"id": "x", "username": "mallory"})
        tampered = f"{header}.{forged.split('.')[1]}.{signature}"

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as fresh:
            response = await fresh.get("/profile", headers={"Cookie": f"token={tampered}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: Invalid token"

    @pytest.mark.asyncio
    async def test_profile_with_expired_cookie(self, app):
        expired = app.state.token_service.issue(
            {"id": "1", "username": "alice"}, ttl=timedelta(seconds=-5)
        )
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as fresh:
            response = await fresh.get("/profile", headers={"Cookie": f"token={expired}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: Invalid token"


class TestSessionScenario:

    @pytest.mark.asyncio
    async def test_signup_login_profile_logout(self, test_client):
        """signup → login → profile → logout → profile rejected."""
        signup = await test_client.post("/signup", json={"username": "alice", "password": "pw1"})
        assert signup.status_code == 201

        login = await test_client.post("/login", json={"username": "alice", "password": "pw1"})
        assert login.status_code == 200
        assert "token" in login.cookies

        profile = await test_client.get("/profile")
        assert profile.status_code == 200
        user = profile.json()["user"]
        assert user["username"] == "alice"
        assert user["id"] == login.json()["user"]["id"]

        logout = await test_client.post("/logout")
        assert logout.status_code == 200
        assert logout.json() == {"message": "Logout successful"}
        assert logout.headers["set-cookie"].startswith("token=")

        after = await test_client.get("/profile")
        assert after.status_code == 401
        assert after.json()["message"] == "Unauthorized: No token provided"

    @pytest.mark.asyncio
    async def test_logout_without_session(self, test_client):
        response = await test_client.post("/logout")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_responses_carry_request_id(self, test_client):
        response = await test_client.get("/profile", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"
        assert response.json()["request_id"] == "abc12345"
