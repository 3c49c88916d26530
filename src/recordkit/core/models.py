"""Record shape models: field descriptors and resolved records.

Usage:
    FieldDescriptor("id", int, {"json": "id"})
    FieldSpec("score", 0.0)                      # type given by witness
    FieldSpec("reader", TypeSpec(SupportsRead))  # type given directly
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from recordkit.core.types import type_name

EMPTY_TAG: Mapping[str, Any] = MappingProxyType({})


def freeze_tag(tag: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Return a read-only copy of a tag mapping.

    A tag is stored as the dataclass field `metadata` of the field it describes.

    Raises:
        TypeError: If tag is not a mapping.
    """
    if not tag:
        return EMPTY_TAG
    if not isinstance(tag, Mapping):
        raise TypeError(f"Field tag must be a mapping, got {type(tag).__name__}")
    return MappingProxyType(dict(tag))


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Name, declared type and metadata tag of one record field."""

    name: str
    type: Any
    tag: Mapping[str, Any] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", freeze_tag(self.tag))

    def __repr__(self) -> str:
        return f"FieldDescriptor({self.name!r}, {type_name(self.type)}, {dict(self.tag)!r})"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Builder input: a field whose type is designated by a witness value."""

    name: str
    witness: Any
    tag: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class ResolvedRecord:
    """Outcome of resolving a record value.

    Attributes:
        record: The dataclass instance, after at most one dereference.
        by_reference: True if the caller passed a Ref.
        fields: The record's shape in declaration order.
    """

    record: Any
    by_reference: bool
    fields: tuple[FieldDescriptor, ...]

    @property
    def record_type(self) -> type:
        return type(self.record)

    def lookup(self, name: str) -> FieldDescriptor | None:
        """Find a field by name.

        Returns:
            The descriptor, or None if the record has no such field.
        """
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None
