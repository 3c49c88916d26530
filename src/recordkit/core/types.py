"""Core type definitions for recordkit.

Usage:
    type_of(42)                   # int
    type_of(TypeSpec(Sized))      # Sized, a type that has no natural witness
    zero_value(list[int])         # []
"""

from __future__ import annotations

import sys
import types
import typing
from dataclasses import MISSING, dataclass, fields, is_dataclass
from typing import Any

type Copy[T] = T
"""Type alias indicating a value is a copy that won't alias the record.

When you see `Copy[T]` in a return type, the returned value is a copy: deep
where the value allows it, shallow otherwise. Values that cannot be copied
at all (locks, sockets, open files) are returned as they are.
"""

_SCALARS: tuple[type, ...] = (bool, int, float, complex, str, bytes)
_CONTAINERS: tuple[type, ...] = (list, dict, set, frozenset, tuple)


@dataclass(frozen=True, slots=True)
class TypeSpec:
    """Designates a type directly instead of through a witness value.

    Protocols, unions and generic aliases have no instances to act as
    witnesses, so `TypeSpec(tp)` stands in for them wherever a witness is
    accepted.
    """

    type: Any


def type_of(witness: Any) -> Any:
    """Return the type designated by a witness.

    Args:
        witness: Any value, or a TypeSpec.

    Returns:
        `witness.type` for a TypeSpec, `type(witness)` otherwise.
    """
    if isinstance(witness, TypeSpec):
        return witness.type
    return type(witness)


def type_name(tp: Any) -> str:
    """Fully qualified, human readable name of a type or type expression."""
    if isinstance(tp, type) and not isinstance(tp, types.GenericAlias):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def zero_value(tp: Any, _building: frozenset[type] = frozenset()) -> Any:
    """Return the zero value for a field type.

    Scalars and builtin containers get their empty value, dataclasses are
    zero-initialized field by field, anything else is None.

    Args:
        tp: Declared field type.

    Returns:
        A fresh zero value.
    """
    origin = typing.get_origin(tp)
    if origin is not None:
        if isinstance(origin, type) and issubclass(origin, _CONTAINERS):
            return origin()
        return None
    if not isinstance(tp, type):
        return None
    if tp in _SCALARS or tp in _CONTAINERS:
        return tp()
    # A dataclass nested in itself has no finite zero value
    if is_dataclass(tp) and tp not in _building:
        return zero_instance(tp, _building)
    return None


def zero_instance(cls: type, _building: frozenset[type] = frozenset()) -> Any:
    """Instantiate a dataclass with every init field set to its zero value.

    Fields with their own default keep it.
    """
    hints = field_types(cls)
    building = _building | {cls}
    kwargs = {}
    for f in fields(cls):
        if not f.init or f.default is not MISSING or f.default_factory is not MISSING:
            continue
        kwargs[f.name] = zero_value(hints.get(f.name, f.type), building)
    return cls(**kwargs)


def field_types(cls: type) -> dict[str, Any]:
    """Resolve the declared type of every field of a dataclass.

    String annotations are evaluated one field at a time against the class's
    module and namespace, so one unresolvable name only leaves that field's
    annotation as a raw string.

    Args:
        cls: Dataclass type.

    Returns:
        Field name -> resolved type, or the raw annotation if it cannot be
        resolved.
    """
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        hints = {}
    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = dict(vars(cls))
    resolved: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in hints:
            resolved[f.name] = hints[f.name]
            continue
        annotation = f.type
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, localns)  # noqa: S307
            except (NameError, AttributeError, TypeError):
                annotation = f.type
        resolved[f.name] = annotation
    return resolved
