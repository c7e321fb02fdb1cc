"""
NoteKeeper Backend: Shared Response Schemas
===========================================

What:  Response shapes shared by every router: confirmations, errors and
       the health probe.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation, e.g. {"message": "Logout successful"}."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Fields:
        error: Machine-readable error code (e.g. "bad_request", "not_found")
        message: Human-readable description, always present
        details: Optional extra context (e.g. schema errors, store error text)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "unauthenticated",
            "message": "Unauthorized: No token provided",
            "request_id": "3f2a9c1e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
