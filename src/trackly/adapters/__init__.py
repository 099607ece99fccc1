"""Adapters (infrastructure) for TRACKLY.

Concrete implementations of the interfaces: in-memory and SQLAlchemy entity
stores and units of work, ID generators, entity serialization, and the
database wiring (engine, metadata, migrations).

Dependency rule: may import `trackly.domain` and `trackly.interfaces`; the
domain must not import this package.
"""
