"""
NoteKeeper Backend: FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) builds the engine, session factory, password
       hasher, token service and auth service from one Settings object,
       stores them on app.state, then registers middleware, exception
       handlers and routers.
Who:   uvicorn imports `notekeeper.main:app`; tests call create_app() with
       their own Settings.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐             │
    │  │  Req ID  │→│ Logging  │→│   CORS   │             │
    │  └──────────┘ └──────────┘ └──────────┘             │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────┐ ┌────────────┐ ┌───────────┐  │
    │  │ /signup /login   │ │ /note ...  │ │ /health   │  │
    │  │ /logout /profile │ │            │ │           │  │
    │  └──────────────────┘ └────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ BadRequest/Conflict→400 │ Unauth→401 │ 404   │   │
    │  │ Internal→500 │ schema errors→400 │ other→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notekeeper import __version__
from notekeeper.config import Settings, get_settings
from notekeeper.database import (
    build_engine,
    build_session_factory,
    create_tables,
    dispose_engine,
)
from notekeeper.exceptions import InternalError, NoteKeeperError
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware, request_id_var
from notekeeper.routes import auth, health, notes
from notekeeper.security.passwords import PasswordHasher
from notekeeper.security.tokens import TokenService
from notekeeper.services.auth_service import AuthService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate critical configuration (logged, not fatal)
        3. Create tables when auto_create_tables is set
    Shutdown:
        1. Dispose the database engine
    """
    settings: Settings = app.state.settings

    setup_logging(settings)
    logger.info("NoteKeeper Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.warning("%s", str(e))

    if settings.auto_create_tables:
        await create_tables(app.state.engine)
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    logger.info("NoteKeeper Backend shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to JSON error bodies.

    Handler hierarchy:
        InternalError           → 500, message includes the store error text
        NoteKeeperError (base)  → exc.status_code (400 / 401 / 404)
        RequestValidationError  → 400 (body did not match the schema)
        Exception (fallback)    → 500, generic message

    Every body has a `message` field. Stack traces are logged, never returned.
    """

    @app.exception_handler(InternalError)
    async def handle_internal_error(request: Request, exc: InternalError):
        rid = request_id_var.get("")
        logger.error("[%s] Internal error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": {"error": exc.detail},
                "request_id": rid,
            },
        )

    @app.exception_handler(NoteKeeperError)
    async def handle_app_error(request: Request, exc: NoteKeeperError):
        """Client-side failures: bad input, duplicates, auth, missing notes."""
        rid = request_id_var.get("")
        logger.info("[%s] %s: %s", rid, exc.error_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Body did not match the request schema (wrong types, not JSON, ...)."""
        rid = request_id_var.get("")
        errors = jsonable_encoder(exc.errors())
        message = "Invalid request body"
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"Invalid request body: {location or 'body'}: {first.get('msg', 'invalid')}"
        logger.info("[%s] Request validation failed: %s", rid, message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "bad_request",
                "message": message,
                "details": {"errors": errors},
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": f"Internal Server Error: {exc}",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to build everything from; defaults to the
                  process-wide get_settings()

    Returns:
        Fully configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="NoteKeeper API",
        description="Note-taking API with cookie-based session authentication.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Shared Components ─────────────────────────────────────────────────
    engine = build_engine(settings)
    token_service = TokenService.from_settings(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = token_service
    app.state.auth_service = AuthService(
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        token_service=token_service,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
