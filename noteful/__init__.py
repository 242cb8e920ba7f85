"""
Noteful API: Application Package Initializer
==============================================

What: Marks the `noteful` directory as a Python package.
Who:  Imported by uvicorn (`noteful.main:app`), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers, Location
    ├─────────────────────────────────────┤
    │    Services (Validation, CRUD,      │  ← one ResourceService per resource
    │    Sanitization)                    │
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Folders and notes share the same generic CRUD contract; only the field
    lists and labels differ between the two resources.
"""

__version__ = "1.0.0"
