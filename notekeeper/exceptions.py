"""
NoteKeeper Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for each failure the API can report.
How:   Each exception class carries a message, an optional context dict, the
       HTTP status it maps to and a machine-readable error code. Global
       exception handlers (registered in main.py) turn them into JSON bodies
       that always contain a `message` field.
Who:   Raised by services, validators and the auth gate.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── BadRequestError       → 400 Bad Request (malformed or oversized input)
    ├── ConflictError         → 400 Bad Request (duplicate username)
    ├── UnauthenticatedError  → 401 Unauthorized
    ├── NotFoundError         → 404 Not Found
    ├── InternalError         → 500 Internal Server Error
    └── InvalidTokenError     → token verification failed (mapped to 401 by the gate)
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, returned as `details` only
                  where the handler chooses to)
    """

    status_code: int = 500
    error_code: str = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(NoteKeeperError):
    """
    Raised when client input fails validation.

    When:    Missing note fields, title/content over their length limits,
             request bodies that do not match the schema.
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "bad_request"

    def __init__(
        self,
        message: str = "Bad request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(NoteKeeperError):
    """
    Raised when a unique key is already taken.

    When:    Signup with a username that exists, either found by the
             pre-insert lookup or rejected by the unique constraint.
    HTTP:    400 Bad Request (the API reports duplicates as 400, not 409)
    """

    status_code = 400
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Username already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthenticatedError(NoteKeeperError):
    """
    Raised when the caller's identity cannot be established.

    When:    No session cookie, invalid or expired token, unknown user or
             wrong password at login.
    HTTP:    401 Unauthorized
    """

    status_code = 401
    error_code = "unauthenticated"

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /note/{id} with an id that has no record.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the service layer converts
    that None into this exception.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource.lower()
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class InternalError(NoteKeeperError):
    """
    Raised when the store or runtime fails unexpectedly.

    HTTP:    500 Internal Server Error

    The response message includes the underlying error text, e.g.
    "Internal Server Error: (sqlite3.OperationalError) no such table: notes".
    """

    status_code = 500
    error_code = "internal_error"

    def __init__(
        self,
        detail: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "Internal Server Error"
        if detail:
            message = f"{message}: {detail}"
        ctx = context or {}
        ctx["error"] = detail
        super().__init__(message=message, context=ctx)
        self.detail = detail


class InvalidTokenError(NoteKeeperError):
    """
    Raised by the token service when a token cannot be trusted.

    When:    Bad signature, malformed structure, missing claims or expiry.
    HTTP:    Never returned as-is; the auth gate converts it into
             UnauthenticatedError("Unauthorized: Invalid token").
    """

    status_code = 401
    error_code = "invalid_token"

    def __init__(
        self,
        message: str = "Invalid token",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
