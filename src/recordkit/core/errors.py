"""Error taxonomy for record operations.

Every strict operation either succeeds or raises exactly one RecordError
subclass. The `must_*` forms turn those into a RecordPanic, which derives
from BaseException so that `except Exception` handlers do not swallow it.

Usage:
    try:
        value = field(record, "name")
    except FieldNotFoundError as e:
        print(e.field_name, e.record_type)
"""

from __future__ import annotations

from enum import Enum, auto

from recordkit.core.types import type_name


class ErrorKind(Enum):
    """Closed set of structural failures."""

    NIL_VALUE = auto()  # None where a record or a non-null Ref was required
    NOT_A_REFERENCE = auto()  # Mutation target passed by value
    NOT_A_RECORD = auto()  # Resolved value is not a dataclass instance
    FIELD_NOT_FOUND = auto()  # Named lookup failed on a resolved record


class RecordError(Exception):
    """Base class for structural failures of record operations."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NilValueError(RecordError):
    """Raised when a record value or its reference target is None."""

    kind = ErrorKind.NIL_VALUE

    def __init__(self, message: str = "nil value") -> None:
        super().__init__(message)


class NotAReferenceError(RecordError):
    """Raised when a mutation target is not passed as a Ref."""

    kind = ErrorKind.NOT_A_REFERENCE

    def __init__(self, actual_type: type) -> None:
        self.actual_type = actual_type
        super().__init__(f"not a reference: got {type_name(actual_type)}, expected Ref")


class NotARecordError(RecordError):
    """Raised when a resolved value is not a dataclass instance."""

    kind = ErrorKind.NOT_A_RECORD

    def __init__(self, actual_type: type) -> None:
        self.actual_type = actual_type
        super().__init__(f"not a record: {type_name(actual_type)} is not a dataclass instance")


class FieldNotFoundError(RecordError):
    """Raised when a record has no field with the requested name."""

    kind = ErrorKind.FIELD_NOT_FOUND

    def __init__(self, field_name: str, record_type: type) -> None:
        self.field_name = field_name
        self.record_type = record_type
        super().__init__(f"field not found: {type_name(record_type)} has no field {field_name!r}")


class RecordPanic(BaseException):
    """Unrecoverable failure raised by the `must_*` operations.

    Attributes:
        error: The RecordError that caused the abort.
    """

    def __init__(self, error: RecordError) -> None:
        self.error = error
        super().__init__(f"{error.kind.name}: {error}")

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
