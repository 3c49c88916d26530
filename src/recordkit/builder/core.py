"""Record builder: synthesize a record type from an accumulated field list.

Usage:
    record = (
        RecordBuilder()
        .with_field("id", 0, {"json": "id"})
        .with_field("score", 0.0)
        .build()
    )
    record.id     # 0
    record.score  # 0.0

Note:
    Field order of the synthesized type currently follows insertion order,
    but it is not part of the contract. Look fields up by name.
"""

from __future__ import annotations

import keyword
import warnings
from collections.abc import Iterator, Mapping
from typing import Any

from recordkit.config import RecordKitSettings, get_settings
from recordkit.core.models import FieldDescriptor, FieldSpec
from recordkit.core.synthesis import make_record_type
from recordkit.core.types import TypeSpec, type_of
from recordkit.core.wrapper import Ref


class RecordBuilder:
    """Mutable accumulator of fields for a new record type.

    Every build synthesizes a new, independent type, even from identical
    contents. The builder stays usable after building. It is not safe to
    share one builder between threads.

    Args:
        settings: Synthesis settings; process-wide settings if None.
    """

    def __init__(self, settings: RecordKitSettings | None = None) -> None:
        self._settings = settings
        self._fields: dict[str, FieldDescriptor] = {}

    def with_field(
        self, name: str, witness: Any, tag: Mapping[str, Any] | None = None
    ) -> RecordBuilder:
        """Add or replace a field. The last write for a name wins.

        Args:
            name: Field name; must be a valid identifier and not a keyword.
            witness: Value whose type is the field type, or a TypeSpec.
            tag: Field metadata.

        Returns:
            This builder, for chaining.

        Raises:
            ValueError: If name is not usable as a field name.
        """
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise ValueError(f"Invalid field name: {name!r}")
        self._fields[name] = FieldDescriptor(name, type_of(witness), tag)
        return self

    def with_fields(self, *fields: FieldSpec | FieldDescriptor) -> RecordBuilder:
        """Add several fields, as with_field does for each one.

        FieldDescriptors, e.g. from schema_of, add a field of their declared type.

        Returns:
            This builder, for chaining.
        """
        seen: set[str] = set()
        for f in fields:
            if f.name in seen:
                warnings.warn(
                    f"with_fields() received field {f.name!r} more than once. "
                    f"Only the last one will be kept.",
                    stacklevel=2,
                )
            seen.add(f.name)
            if isinstance(f, FieldDescriptor):
                self.with_field(f.name, TypeSpec(f.type), f.tag)
            else:
                self.with_field(f.name, f.witness, f.tag)
        return self

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        """Accumulated fields."""
        return tuple(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def build(self) -> Any:
        """Synthesize a new record type and return a zero-initialized instance."""
        return self._build_type()()

    def build_ref(self) -> Ref[Any]:
        """Synthesize a new record type and return a Ref to a zero-initialized instance."""
        return Ref(self.build())

    def _build_type(self) -> type:
        settings = self._settings or get_settings()
        return make_record_type(settings.builder_type_name, self._fields.values(), settings)
