"""Integration tests.

Purpose
- Run the SQLAlchemy adapters, Alembic migrations and bootstrap wiring
  against real SQLite databases.

Guidelines
- Prefer a migrated file database (``sqlite_engine_file``) when the schema
  under test is the one users get; ``sqlite_engine_memory`` is enough otherwise.
- Minimize mocking.
"""
