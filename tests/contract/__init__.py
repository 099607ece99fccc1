"""Contract tests.

Each suite states the behavior of one interface (``EntityStore``,
``IdGenerator``) once and runs it against every implementation, so the
in-memory and SQLAlchemy adapters stay interchangeable. Implementations are
parametrized through the suite's ``conftest.py``; assertions touch only the
public contract.
"""
