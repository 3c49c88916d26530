"""recordkit: runtime introspection and synthesis of dataclass records.

Usage:
    from dataclasses import dataclass
    from recordkit import Ref, RecordBuilder, copy_fields, field, filter_fields

    @dataclass
    class User:
        id: int
        name: str
        email: str

    user = User(1, "ada", "ada@example.com")

    public = filter_fields(Ref(user), "id", "name")  # Ref to a new record type
    copy_fields(user, public)
    field(public, "name")  # "ada"

    row = RecordBuilder().with_field("id", 0).with_field("score", 0.0).build_ref()
    copy_fields(user, row)  # copies id, leaves score alone
"""

__version__ = "0.1.0"

# Builder
from recordkit.builder import RecordBuilder

# Configuration
from recordkit.config import RecordKitSettings, get_settings

# Core primitives
from recordkit.core import (
    Copy,
    ErrorKind,
    FieldDescriptor,
    FieldNotFoundError,
    FieldSpec,
    NilValueError,
    NotAReferenceError,
    NotARecordError,
    RecordError,
    RecordPanic,
    Ref,
    ResolvedRecord,
    TypeSpec,
    deref,
    is_capability,
    type_of,
)

# Introspection
from recordkit.introspection import (
    FieldReplacementMap,
    copy_fields,
    field,
    field_is_type,
    filter_fields,
    has_field,
    is_type,
    must_copy_fields,
    must_field,
    must_field_is_type,
    must_filter_fields,
    must_has_field,
    must_replace_fields_type,
    must_resolve,
    replace_fields_type,
    resolve,
    schema_of,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "TypeSpec",
    "type_of",
    "Ref",
    "deref",
    "FieldDescriptor",
    "FieldSpec",
    "ResolvedRecord",
    "is_capability",
    # Errors
    "ErrorKind",
    "RecordError",
    "NilValueError",
    "NotAReferenceError",
    "NotARecordError",
    "FieldNotFoundError",
    "RecordPanic",
    # Introspection
    "FieldReplacementMap",
    "resolve",
    "schema_of",
    "copy_fields",
    "replace_fields_type",
    "filter_fields",
    "has_field",
    "is_type",
    "field",
    "field_is_type",
    "must_resolve",
    "must_copy_fields",
    "must_replace_fields_type",
    "must_filter_fields",
    "must_has_field",
    "must_field",
    "must_field_is_type",
    # Builder
    "RecordBuilder",
    # Configuration
    "RecordKitSettings",
    "get_settings",
]
