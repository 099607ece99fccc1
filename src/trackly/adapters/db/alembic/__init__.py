"""Alembic migration environment for TRACKLY."""
