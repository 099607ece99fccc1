"""Tri-state handling for partial updates.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field is left unchanged.
* ``None``: the field is explicitly cleared (only if allowed).
* concrete ``T``: the field is set to a new value.
"""

from dataclasses import dataclass
from typing import TypeVar

from .errors import MissingFieldError


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel for fields intentionally left out of an update."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


UNSET = _UnsetType()

T = TypeVar("T")
type Unsettable[T] = T | _UnsetType | None


def resolve(
    value: T | None | _UnsetType,
    current: T,
    *,
    clearable: bool,
    field: str,
    kind: str,
) -> T | None:
    """Resolve a tri-state value against the current value.

    Returns:
        ``current`` for ``UNSET``, otherwise ``value``.

    Raises:
        MissingFieldError: If clearing a field that is not clearable.
    """
    if isinstance(value, _UnsetType):
        return current
    if value is None and not clearable:
        raise MissingFieldError(kind, field)
    return value
