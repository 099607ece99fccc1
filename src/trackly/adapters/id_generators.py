"""ID generators for TRACKLY."""

import threading
import uuid

from ulid import monotonic

from trackly.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs sort lexicographically by creation time, so entities created in one
    session list in creation order. Backed by `ulid-py`.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self, prefix: str = "") -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return f"{prefix}{monotonic.new()}"


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 generator. Ids carry no ordering."""

    def new_id(self, prefix: str = "") -> str:
        """Generate a new UUID."""
        return f"{prefix}{uuid.uuid4()}"


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ids.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, length: int = 6) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self, prefix: str = "") -> str:
        """Generate the next id in sequence."""
        with self._lock:
            self._counter += 1
            return f"{prefix}{self._counter:0{self._length}d}"
