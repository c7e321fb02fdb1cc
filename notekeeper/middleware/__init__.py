# Middleware package init
"""
NoteKeeper Backend: Middleware Package
======================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID for every log line and error body
    2. Logging: access line with status and duration
    3. CORS: FastAPI's CORSMiddleware, credentials allowed for the cookie

The auth gate and the note validator are route dependencies, not ASGI
middleware; they only run for the routes that declare them.
"""
