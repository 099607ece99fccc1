"""Unit tests.

Domain rules, adapters over in-memory data, handlers over an in-memory bus and
CLI helpers. No network and no database files; the few tests needing SQL use
an in-memory SQLite engine or compile DDL only.
"""
