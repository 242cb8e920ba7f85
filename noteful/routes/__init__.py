# Routes package init
"""
Noteful API: API Routes Package
=================================

Route Inventory:
    - folders.py:  /folders, /folders/{folder_id}   (mounted under API_PREFIX)
    - notes.py:    /notes, /notes/{note_id}         (mounted under API_PREFIX)
    - health.py:   GET /health                      (always at the root)
    - common.py:   Location header and OpenAPI error helpers

Routes only deal with HTTP: status codes, headers, body parsing.
Validation, storage and sanitization happen in noteful.services.
"""
