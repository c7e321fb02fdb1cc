# Services package init
"""
NoteKeeper Backend: Services Layer
==================================

What:  Business logic between routes (HTTP) and the database (persistence).

Service Inventory:
    - AuthService: signup and login (hashing, uniqueness, token issuance)
    - NoteService: note CRUD with partial-update semantics

Services raise NoteKeeperError subclasses; they never build HTTP responses.
"""
