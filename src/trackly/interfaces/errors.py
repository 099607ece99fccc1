"""Errors raised by entity store implementations."""


class StoreError(Exception):
    """Base class for all entity store errors."""

    def __init__(self, kind: str, entity_id: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} ({entity_id}) store error"
        super().__init__(message)
        self.kind = kind
        self.entity_id = entity_id


class EntityNotFoundError(StoreError):
    """Raised when an entity is required but not present in the store."""

    reason = "not_found"

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(kind, entity_id, f"{kind} ({entity_id}) not found")


class DuplicateEntityError(StoreError):
    """Raised when adding an entity whose id or provenance is already stored."""

    reason = "duplicate"

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(kind, entity_id, f"{kind} ({entity_id}) already exists")


class ConcurrentCommitError(StoreError):
    """Raised when another unit of work committed first and this one is stale."""

    reason = "concurrent_commit"

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            "store",
            str(actual),
            f"store revision moved from {expected} to {actual} before commit",
        )
        self.expected = expected
        self.actual = actual


class StoreUnavailableError(StoreError):
    """Raised when the backing store cannot be reached or fails to execute."""

    reason = "unavailable"

    def __init__(self, detail: str) -> None:
        super().__init__("store", "-", f"store unavailable: {detail}")
        self.detail = detail
