"""Introspection engine: resolve, inspect, copy and derive record values."""

from recordkit.introspection.must import (
    must_copy_fields,
    must_field,
    must_field_is_type,
    must_filter_fields,
    must_has_field,
    must_replace_fields_type,
    must_resolve,
)
from recordkit.introspection.operations import (
    FieldReplacementMap,
    copy_fields,
    field,
    field_is_type,
    filter_fields,
    has_field,
    is_type,
    replace_fields_type,
    resolve,
    schema_of,
)

__all__ = [
    # Strict operations
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
    # Permissive operations
    "must_resolve",
    "must_copy_fields",
    "must_replace_fields_type",
    "must_filter_fields",
    "must_has_field",
    "must_field",
    "must_field_is_type",
]
