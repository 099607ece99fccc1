"""Domain layer utilities.

Conversions between entities and plain JSON-friendly dicts, used by the
persistence adapters and by hosts that ship entities over the wire.
"""

import datetime as dt
from collections.abc import Callable
from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def dict_to_dataclass(dc_type: type[D], values: dict[str, Any]) -> D:
    """Recursively build a dataclass instance from a nested dict.

    Args:
        dc_type: The dataclass type to build.
        values: The dict containing the data.

    Returns:
        An instance of dc_type populated with data from values.

    Note:
        - Fields in values that are not in dc_type are ignored.
        - All fields without defaults must be present in values.
        - Enum, date and datetime fields are rebuilt from their serialized
          values; tuples of dataclasses are rebuilt element-wise.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    type_hints = get_type_hints(dc_type)
    kwargs = {}
    for field in fields(dc_type):
        has_default = (
            field.default is not MISSING or field.default_factory is not MISSING
        )
        field_type = type_hints.get(field.name, field.type)
        if field.name in values:
            kwargs[field.name] = _coerce(field_type, values[field.name])
        else:
            if not has_default and field.init:
                raise KeyError(f"Missing required field '{field.name}'")
            if not field.init:
                continue
            if field.default is not MISSING:
                kwargs[field.name] = field.default
            elif field.default_factory is not MISSING:
                factory = cast(Callable[[], Any], field.default_factory)  # pragma: no mutate # fmt: skip
                kwargs[field.name] = factory()
    return cast(D, dc_type(**kwargs))  # pragma: no mutate


def dataclass_to_dict(instance: Any) -> dict[str, Any]:
    """Flatten a dataclass instance into JSON-friendly primitives.

    Enums become their values, dates become ISO strings and tuples become lists.
    """
    if not is_dataclass(instance) or isinstance(instance, type):
        raise TypeError(f"{instance!r} is not a dataclass instance")
    return {f.name: _to_primitive(getattr(instance, f.name)) for f in fields(instance)}


def _to_primitive(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_primitive(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_primitive(v) for k, v in value.items()}
    return value


def _coerce(field_type: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = get_origin(field_type)
    if origin in (Union, UnionType):
        args = [arg for arg in get_args(field_type) if arg is not NoneType]
        return _coerce(args[0], value) if len(args) == 1 else value
    if origin in (tuple, list):
        args = [arg for arg in get_args(field_type) if arg is not Ellipsis]
        inner = args[0] if args else Any
        items = [_coerce(inner, item) for item in value]
        return tuple(items) if origin is tuple else items
    if is_dataclass(field_type) and isinstance(value, dict):
        return dict_to_dataclass(cast(type[Any], field_type), value)
    if isinstance(field_type, type) and issubclass(field_type, Enum):
        return field_type(value)
    if field_type is dt.datetime and isinstance(value, str):
        return dt.datetime.fromisoformat(value)
    if field_type is dt.date and isinstance(value, str):
        return dt.date.fromisoformat(value)
    return value
