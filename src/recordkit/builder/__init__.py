"""Record builder: synthesize new record types at runtime."""

from recordkit.builder.core import RecordBuilder

__all__ = [
    "RecordBuilder",
]
