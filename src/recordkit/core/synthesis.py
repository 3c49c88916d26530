"""Runtime synthesis of record types.

Every call creates a brand-new dataclass type; nothing is cached, so two
synthesized types are never identical even when their fields are.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import field, make_dataclass
from functools import partial

from recordkit.config import RecordKitSettings, get_settings
from recordkit.core.models import FieldDescriptor
from recordkit.core.types import type_name, zero_value

logger = logging.getLogger(__name__)


def make_record_type(
    name: str,
    descriptors: Iterable[FieldDescriptor],
    settings: RecordKitSettings | None = None,
) -> type:
    """Create a dataclass type with the given fields, in the given order.

    Each field defaults to the zero value of its type and carries its tag as
    dataclass field metadata.

    Args:
        name: Class name of the new type.
        descriptors: Fields of the new type.
        settings: Synthesis settings; process-wide settings if None.

    Returns:
        The new dataclass type.
    """
    settings = settings or get_settings()
    spec = [
        (
            d.name,
            d.type,
            field(default_factory=partial(zero_value, d.type), metadata=d.tag),
        )
        for d in descriptors
    ]
    cls = make_dataclass(name, spec, slots=settings.slots, module=settings.synthesized_module)
    logger.debug(
        "Synthesized %s(%s)",
        name,
        ", ".join(f"{n}: {type_name(t)}" for n, t, _ in spec),
    )
    return cls
