"""Unit of Work interface for TRACKLY.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing an EntityStore and abstract commit/rollback methods. Everything
written through ``store`` inside one ``with`` block becomes visible together
on `commit`, or not at all.
"""

from __future__ import annotations

import abc

from .entity_store import EntityStore


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    store: EntityStore

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit; committed work is unaffected.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist staged changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Discard staged changes."""
