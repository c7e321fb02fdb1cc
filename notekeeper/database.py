"""
NoteKeeper Backend: Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `create_app()` builds one engine and one session factory from the
       settings and stores them on `app.state`. The `get_db_session`
       dependency hands each request its own session, committing on success
       and rolling back on error.
Who:   Services receive the session from route handlers; nothing else opens
       connections.

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from Settings and are only
    applied to server databases. SQLite (aiosqlite) uses SQLAlchemy's default
    pool for file databases.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notekeeper.config import Settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the app, `create_tables()` and Alembic.
    """
    pass


# ── Engine & Session Factory ──────────────────────────────────────────────
def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    SQL echo is enabled when log_level is DEBUG.
    """
    kwargs = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory with expire_on_commit=False, so ORM objects stay readable
    after commit when the response is serialized.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory on app.state
        2. Yields it to the route handler
        3. On success: commits whatever the services left pending
        4. On error: rolls back
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/note")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            return await note_service.list_notes(db)
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables registered on Base (development and tests)."""
    # Models must be imported so their tables are registered on Base.metadata
    from notekeeper.models import note, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all pooled connections at shutdown."""
    await engine.dispose()
