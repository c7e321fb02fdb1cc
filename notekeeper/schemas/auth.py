"""
NoteKeeper Backend: Auth Request/Response Schemas
=================================================

What:  Pydantic models for /signup, /login and /profile.

The password hash never appears in any of these models.
"""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Body of POST /signup and POST /login."""
    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1)


class UserPublic(BaseModel):
    """Public view of a user: identifier and username only."""
    id: str
    username: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserPublic


class IdentityClaims(BaseModel):
    """
    Claims carried inside a session token.

    iat / exp are Unix timestamps (seconds).
    """
    id: str
    username: str
    iat: int
    exp: int


class ProfileResponse(BaseModel):
    message: str = "You are authenticated"
    user: IdentityClaims
