"""
SnapEdit Backend: Application Package Initializer
===================================================

What: Marks the `snapedit` directory as a Python package.
Why:  Enables module imports like `from snapedit.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is an ownership-scoped CRUD layer for screenshot projects:

    ┌─────────────────────────────────────┐
    │      Routes (named actions)         │  ← HTTP concerns, identity extraction
    ├─────────────────────────────────────┤
    │   Services (guard, ownership, CRUD) │  ← One method per action
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Every service method receives the caller identity explicitly; nothing
    below the routes reads request state.
"""

__version__ = "1.0.0"
