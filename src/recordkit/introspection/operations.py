"""Record introspection: validate, inspect, copy and derive record values.

A record value is a dataclass instance, passed directly or as a Ref. Every
operation resolves its input first and raises one RecordError subclass on
structural failure.

Missing fields are handled per operation:
    has_field, filter_fields, field   raise FieldNotFoundError
    filter_fields (repeated name)     raises ValueError
    copy_fields                       skips the field
    field_is_type                     returns False
    replace_fields_type               ignores unknown replacement keys

Usage:
    @dataclass
    class User:
        id: int
        name: str

    has_field(User(1, "ada"), "name")               # True
    slim = filter_fields(Ref(user), "id")           # Ref to a new record type
    wide = replace_fields_type(user, {"id": 0.0})   # id is now a float field
    copy_fields(user, Ref(slim.unwrap()))
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from recordkit.config import RecordKitSettings, get_settings
from recordkit.core.capability import is_capability, satisfies
from recordkit.core.errors import (
    FieldNotFoundError,
    NilValueError,
    NotAReferenceError,
    NotARecordError,
)
from recordkit.core.models import FieldDescriptor, ResolvedRecord
from recordkit.core.synthesis import make_record_type
from recordkit.core.types import Copy, field_types, type_name, type_of
from recordkit.core.wrapper import Ref

logger = logging.getLogger(__name__)

type FieldReplacementMap = Mapping[str, Any]
"""Field name -> type witness whose type replaces the field's type."""


def _schema(cls: type) -> tuple[FieldDescriptor, ...]:
    hints = field_types(cls)
    return tuple(
        FieldDescriptor(f.name, hints.get(f.name, f.type), f.metadata) for f in fields(cls)
    )


def resolve(value: Any, require_reference: bool = False) -> ResolvedRecord:
    """Validate a record value and describe its shape.

    Args:
        value: Record, or Ref to a record.
        require_reference: Reject records not passed as a Ref.

    Returns:
        The record after at most one dereference, whether it was passed by
        reference, and its fields in declaration order.

    Raises:
        NilValueError: If value is None or a null Ref.
        NotAReferenceError: If require_reference is set and value is not a Ref.
        NotARecordError: If the resolved value is not a dataclass instance.
    """
    if value is None:
        raise NilValueError()
    by_reference = isinstance(value, Ref)
    if require_reference and not by_reference:
        raise NotAReferenceError(type(value))
    if by_reference:
        if value.is_nil():
            raise NilValueError("nil reference")
        value = value.unwrap()
    # A dataclass class object is a type, not a record value
    if not is_dataclass(value) or isinstance(value, type):
        raise NotARecordError(type(value))
    return ResolvedRecord(record=value, by_reference=by_reference, fields=_schema(type(value)))


def schema_of(value: Any) -> tuple[FieldDescriptor, ...]:
    """Return the fields of a record value in declaration order."""
    return resolve(value).fields


def copy_fields(src: Any, dst: Any) -> None:
    """Copy same-named fields from src into the record referenced by dst.

    Only fields declared on dst are considered. A field is copied when src has
    a field of the same name and either the declared types are equal, or the
    destination type is a capability type that the source field satisfies.
    Every other field is left untouched.

    Args:
        src: Source record, or Ref to one.
        dst: Ref to the destination record, which is mutated in place.

    Raises:
        NilValueError: If src or dst is None or a null Ref.
        NotAReferenceError: If dst is not a Ref.
        NotARecordError: If src or dst does not resolve to a record.
    """
    source = resolve(src)
    target = resolve(dst, require_reference=True)
    # Frozen dataclasses are written the way their own __init__ writes them
    frozen = target.record_type.__dataclass_params__.frozen
    setter = object.__setattr__ if frozen else setattr

    for dst_field in target.fields:
        src_field = source.lookup(dst_field.name)
        if src_field is None:
            logger.debug("copy_fields: %s missing on source, skipped", dst_field.name)
            continue
        value = getattr(source.record, src_field.name)
        if src_field.type != dst_field.type:
            if not is_capability(dst_field.type):
                logger.debug(
                    "copy_fields: %s type mismatch %s -> %s, skipped",
                    dst_field.name,
                    type_name(src_field.type),
                    type_name(dst_field.type),
                )
                continue
            if not satisfies(src_field.type, value, dst_field.type):
                logger.debug(
                    "copy_fields: %s does not satisfy %s, skipped",
                    type_name(src_field.type),
                    type_name(dst_field.type),
                )
                continue
        setter(target.record, dst_field.name, value)


def replace_fields_type(
    src: Any,
    replacements: FieldReplacementMap,
    *,
    settings: RecordKitSettings | None = None,
) -> Any:
    """Derive a record type from src with some field types replaced.

    Field names, tags and order are kept. Keys of replacements that are not
    fields of src are ignored.

    Args:
        src: Model record, or Ref to one.
        replacements: Field name -> type witness for the new field type.
        settings: Synthesis settings; process-wide settings if None.

    Returns:
        A zero-initialized instance of the new type, wrapped in a Ref if src
        was a Ref.

    Raises:
        NilValueError: If src is None or a null Ref.
        NotARecordError: If src does not resolve to a record.
    """
    resolved = resolve(src)
    new_fields = [
        FieldDescriptor(d.name, type_of(replacements[d.name]), d.tag)
        if d.name in replacements
        else d
        for d in resolved.fields
    ]
    settings = settings or get_settings()
    return _instantiate(resolved, new_fields, settings.replaced_suffix, settings)


def filter_fields(src: Any, *names: str, settings: RecordKitSettings | None = None) -> Any:
    """Derive a record type from src with only the named fields.

    Fields appear in the order of names, with their original types and tags.

    Args:
        src: Model record, or Ref to one.
        *names: Fields to keep.
        settings: Synthesis settings; process-wide settings if None.

    Returns:
        A zero-initialized instance of the new type, wrapped in a Ref if src
        was a Ref.

    Raises:
        NilValueError: If src is None or a null Ref.
        NotARecordError: If src does not resolve to a record.
        FieldNotFoundError: If any name is not a field of src.
        ValueError: If a name is given more than once.
    """
    resolved = resolve(src)
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate field names in {names!r}")
    new_fields = []
    for name in names:
        descriptor = resolved.lookup(name)
        if descriptor is None:
            raise FieldNotFoundError(name, resolved.record_type)
        new_fields.append(descriptor)
    settings = settings or get_settings()
    return _instantiate(resolved, new_fields, settings.filtered_suffix, settings)


def _instantiate(
    resolved: ResolvedRecord,
    descriptors: list[FieldDescriptor],
    suffix: str,
    settings: RecordKitSettings,
) -> Any:
    cls = make_record_type(f"{resolved.record_type.__name__}{suffix}", descriptors, settings)
    instance = cls()
    return Ref(instance) if resolved.by_reference else instance


def has_field(value: Any, name: str) -> bool:
    """Check that a record value has a field with the given name.

    Returns:
        True if the field exists.

    Raises:
        NilValueError: If value is None or a null Ref.
        NotARecordError: If value does not resolve to a record.
        FieldNotFoundError: If the record has no such field. Callers get an
            error rather than False for a missing field.
    """
    resolved = resolve(value)
    if resolved.lookup(name) is None:
        raise FieldNotFoundError(name, resolved.record_type)
    return True


def is_type(value: Any, witness: Any) -> bool:
    """Check that the runtime type of value is the type designated by witness.

    Comparison is by type identity, not by structure or subclassing. None on
    either side never matches. When both sides are Refs, the referenced types
    are compared instead, and a null Ref never matches.
    """
    if value is None or witness is None:
        return False
    if isinstance(value, Ref) and isinstance(witness, Ref):
        if value.is_nil() or witness.is_nil():
            return False
        return value.target_type == witness.target_type
    return type(value) == type_of(witness)


def field(value: Any, name: str) -> Copy[Any]:
    """Read a field of a record value.

    Returns:
        A copy of the field's current value, deep where possible. Values that
        cannot be copied (locks, sockets) are returned as they are.

    Raises:
        NilValueError: If value is None or a null Ref.
        NotARecordError: If value does not resolve to a record.
        FieldNotFoundError: If the record has no such field.
    """
    resolved = resolve(value)
    if resolved.lookup(name) is None:
        raise FieldNotFoundError(name, resolved.record_type)
    return _snapshot(getattr(resolved.record, name))


def _snapshot(value: Any) -> Any:
    for clone in (copy.deepcopy, copy.copy):
        try:
            return clone(value)
        except (TypeError, copy.Error):
            continue
    return value


def field_is_type(value: Any, name: str, witness: Any) -> bool:
    """Check the declared type of a record field against a witness's type.

    Returns:
        True if the field is declared with exactly the witness's type. False
        if it is not, or if the record has no such field.

    Raises:
        NilValueError: If value is None or a null Ref.
        NotARecordError: If value does not resolve to a record.
    """
    resolved = resolve(value)
    descriptor = resolved.lookup(name)
    if descriptor is None or witness is None:
        return False
    return descriptor.type == type_of(witness)
