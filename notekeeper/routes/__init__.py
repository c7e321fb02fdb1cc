# Routes package init
"""
NoteKeeper Backend: API Routes Package
======================================

Route Inventory:
    - auth.py:    POST /signup, POST /login, POST /logout, GET /profile
    - notes.py:   POST /note, GET /note, GET/PUT/DELETE /note/{id}
    - health.py:  GET  /health

Routes handle HTTP concerns only (bodies, cookies, status codes); business
logic lives in services.
"""
