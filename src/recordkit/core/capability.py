"""Capability (interface) types and satisfaction checks.

A capability type is defined by the operations it supports rather than by
its concrete class. recordkit treats these as capability types:

    typing.Any and object       # satisfied by everything
    @runtime_checkable Protocol # satisfied structurally
    abstract base classes       # satisfied by subclasses and registered classes
    unions of the above         # satisfied if any member is

Usage:
    @runtime_checkable
    class Named(Protocol):
        def name(self) -> str: ...

    is_capability(Named)              # True
    satisfies(Person, person, Named)  # True if Person has a name() method
"""

from __future__ import annotations

import inspect
import types
import typing
from abc import ABCMeta
from typing import Any


def _is_union(tp: Any) -> bool:
    return typing.get_origin(tp) in (typing.Union, types.UnionType)


def _is_protocol(tp: Any) -> bool:
    return isinstance(tp, type) and getattr(tp, "_is_protocol", False)


def is_capability(tp: Any) -> bool:
    """Check if a declared field type is a capability type.

    Args:
        tp: Declared field type.

    Returns:
        True for Any, object, runtime-checkable Protocols, abstract base
        classes and unions.
    """
    if tp is Any or tp is object:
        return True
    if _is_union(tp):
        return True
    if _is_protocol(tp):
        return getattr(tp, "_is_runtime_protocol", False)
    return isinstance(tp, ABCMeta) and inspect.isabstract(tp)


def satisfies(src_type: Any, value: Any, capability: Any) -> bool:
    """Check if a source field can be stored in a capability-typed field.

    Classes are checked with issubclass. Protocols with data members cannot be
    checked against a class, so the current value is checked instead.

    Args:
        src_type: Declared type of the source field.
        value: Current value of the source field.
        capability: Declared type of the destination field.

    Returns:
        True if the source field satisfies the capability.
    """
    if capability is Any or capability is object:
        return True
    if _is_union(capability):
        return any(
            member == src_type or (is_capability(member) and satisfies(src_type, value, member))
            for member in typing.get_args(capability)
        )
    if not is_capability(capability):
        return False
    if isinstance(src_type, type):
        try:
            return issubclass(src_type, capability)
        except TypeError:
            # Protocols with non-method members only support isinstance
            pass
    return isinstance(value, capability)
