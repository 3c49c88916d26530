from __future__ import annotations

from typing import Any


class Ref[T]:
    """Reference to a record, the pass-by-reference form of a record value.

    Operations that mutate a record take a Ref; operations that derive a new
    record return a Ref when they were given one. `Ref(None)` is a null
    reference.
    """

    __slots__ = ("_target",)

    def __init__(self, target: T | None) -> None:
        self._target = target

    def unwrap(self) -> T | None:
        """Return the referenced record, or None for a null reference."""
        return self._target

    def is_nil(self) -> bool:
        return self._target is None

    @property
    def target_type(self) -> type:
        """Return the type of the referenced record."""
        return type(self._target)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self._target == other._target

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ref({self._target!r})"


def deref(value: Any) -> Any:
    """Get the referenced record, or the value itself if it is not a Ref."""
    if isinstance(value, Ref):
        return value.unwrap()
    return value
