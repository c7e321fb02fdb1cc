"""
NoteKeeper Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each API test gets its own app built by create_app() over a fresh
       SQLite file in tmp_path, so tests never share state.

Fixture Hierarchy:
    test_settings  → Settings pointing at tmp_path/notekeeper.db
    app            → create_app(test_settings) with tables created
    test_client    → HTTPX AsyncClient over ASGITransport (keeps cookies)
    db_session     → AsyncSession on the same database, for service tests
    mock_db_session → AsyncMock session, no database at all
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before notekeeper.main is imported: its module-level app reads these
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='notekeeper_test_')}/default.db")
os.environ.setdefault("JWT_SECRET", "test-secret-not-real")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from notekeeper.config import Settings  # noqa: E402
from notekeeper.database import create_tables, dispose_engine  # noqa: E402
from notekeeper.main import create_app  # noqa: E402

TEST_SECRET = "test-secret-not-real"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'notekeeper.db'}",
        "jwt_secret": TEST_SECRET,
        "bcrypt_rounds": 4,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def test_settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def settings_factory(tmp_path):
    """Builds Settings for an extra app in the same test, e.g. with notes_require_auth."""
    def factory(**overrides) -> Settings:
        overrides.setdefault("database_url", f"sqlite+aiosqlite:///{tmp_path / 'extra.db'}")
        return make_settings(tmp_path, **overrides)
    return factory


@pytest_asyncio.fixture
async def app(test_settings):
    """A fresh application with its tables created."""
    application = create_app(test_settings)
    await create_tables(application.state.engine)
    yield application
    await dispose_engine(application.state.engine)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app in-process.

    The client keeps a cookie jar, so a successful /login carries the
    session cookie into later requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def db_session(app):
    """A session on the test database for calling services directly."""
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def credentials():
    return {"username": "alice", "password": "pw1"}


@pytest.fixture
def note_data():
    return {"title": "Groceries", "content": "Milk, eggs, bread"}
