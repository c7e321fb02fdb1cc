# Security package init
"""
NoteKeeper Backend: Security Package
====================================

What:  Everything that establishes who the caller is.

Module Inventory:
    - passwords.py:     PasswordHasher (bcrypt via passlib)
    - tokens.py:        TokenService (signed, time-limited JWTs via python-jose)
    - dependencies.py:  Auth gate dependencies (require_user, note_access)

All three are stateless apart from the configuration they are built with;
create_app() builds one instance of each and stores it on app.state.
"""
