"""Permissive forms of the introspection operations.

Each `must_*` function calls its strict counterpart and turns a RecordError
into a RecordPanic. Use them where a malformed record is a programming error
rather than a condition to handle.

Usage:
    name = must_field(user, "name")  # RecordPanic instead of FieldNotFoundError
"""

from __future__ import annotations

from typing import Any

from recordkit.config import RecordKitSettings
from recordkit.core.errors import RecordError, RecordPanic
from recordkit.core.models import ResolvedRecord
from recordkit.core.types import Copy
from recordkit.introspection import operations
from recordkit.introspection.operations import FieldReplacementMap


def must_resolve(value: Any, require_reference: bool = False) -> ResolvedRecord:
    """Call resolve and abort on error."""
    try:
        return operations.resolve(value, require_reference)
    except RecordError as e:
        raise RecordPanic(e) from e


def must_copy_fields(src: Any, dst: Any) -> None:
    """Call copy_fields and abort on error."""
    try:
        operations.copy_fields(src, dst)
    except RecordError as e:
        raise RecordPanic(e) from e


def must_replace_fields_type(
    src: Any,
    replacements: FieldReplacementMap,
    *,
    settings: RecordKitSettings | None = None,
) -> Any:
    """Call replace_fields_type and abort on error."""
    try:
        return operations.replace_fields_type(src, replacements, settings=settings)
    except RecordError as e:
        raise RecordPanic(e) from e


def must_filter_fields(src: Any, *names: str, settings: RecordKitSettings | None = None) -> Any:
    """Call filter_fields and abort on error."""
    try:
        return operations.filter_fields(src, *names, settings=settings)
    except RecordError as e:
        raise RecordPanic(e) from e


def must_has_field(value: Any, name: str) -> bool:
    """Call has_field and abort on error, including a missing field."""
    try:
        return operations.has_field(value, name)
    except RecordError as e:
        raise RecordPanic(e) from e


def must_field(value: Any, name: str) -> Copy[Any]:
    """Call field and abort on error."""
    try:
        return operations.field(value, name)
    except RecordError as e:
        raise RecordPanic(e) from e


def must_field_is_type(value: Any, name: str, witness: Any) -> bool:
    """Call field_is_type and abort on error."""
    try:
        return operations.field_is_type(value, name, witness)
    except RecordError as e:
        raise RecordPanic(e) from e
