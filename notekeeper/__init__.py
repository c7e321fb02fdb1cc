"""
NoteKeeper Backend: Application Package
=======================================

What:  A small authenticated note-taking API.
How:   Layered the same way in every module:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Security (hashing, tokens, gate)  │  ← Identity and session cookies
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Signup/login, note CRUD
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
