"""Core functionalities: stateless primitives shared by the engine and the builder.

Architecture Note:
    core/ holds the vocabulary of recordkit: type witnesses, references,
    field descriptors, the error taxonomy, capability checks and type
    synthesis. Neither introspection/ nor builder/ depends on the other;
    both depend only on core/.
"""

from recordkit.core.capability import is_capability, satisfies
from recordkit.core.errors import (
    ErrorKind,
    FieldNotFoundError,
    NilValueError,
    NotAReferenceError,
    NotARecordError,
    RecordError,
    RecordPanic,
)
from recordkit.core.models import FieldDescriptor, FieldSpec, ResolvedRecord, freeze_tag
from recordkit.core.synthesis import make_record_type
from recordkit.core.types import (
    Copy,
    TypeSpec,
    field_types,
    type_name,
    type_of,
    zero_instance,
    zero_value,
)
from recordkit.core.wrapper import Ref, deref

__all__ = [
    # Types
    "Copy",
    "TypeSpec",
    "type_of",
    "type_name",
    "zero_value",
    "zero_instance",
    "field_types",
    # References
    "Ref",
    "deref",
    # Models
    "FieldDescriptor",
    "FieldSpec",
    "ResolvedRecord",
    "freeze_tag",
    # Errors
    "ErrorKind",
    "RecordError",
    "NilValueError",
    "NotAReferenceError",
    "NotARecordError",
    "FieldNotFoundError",
    "RecordPanic",
    # Capabilities
    "is_capability",
    "satisfies",
    # Synthesis
    "make_record_type",
]
