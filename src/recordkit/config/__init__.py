"""Configuration module using Pydantic Settings.

Provides typed configuration for record synthesis with environment variable support.

Usage:
    from recordkit.config import RecordKitSettings, get_settings

    settings = RecordKitSettings(builder_type_name="Row")
    record = RecordBuilder(settings=settings).with_field("id", 0).build()
"""

from recordkit.config.settings import RecordKitSettings, get_settings

__all__ = [
    "RecordKitSettings",
    "get_settings",
]
