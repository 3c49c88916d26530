"""Configuration settings using Pydantic Settings.

Provides typed configuration for synthesized record types.

Usage:
    from recordkit.config import RecordKitSettings

    # Load from environment variables (RECORDKIT_*)
    settings = RecordKitSettings()

    # Or override with explicit values
    settings = RecordKitSettings(slots=False)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecordKitSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for record type synthesis.

    Attributes:
        synthesized_module: Value of `__module__` on synthesized types.
        builder_type_name: Class name of types produced by RecordBuilder.
        replaced_suffix: Appended to the source class name by replace_fields_type.
        filtered_suffix: Appended to the source class name by filter_fields.
        slots: Whether synthesized dataclasses use `__slots__`.

    Environment Variables:
        RECORDKIT_SYNTHESIZED_MODULE
        RECORDKIT_BUILDER_TYPE_NAME
        RECORDKIT_REPLACED_SUFFIX
        RECORDKIT_FILTERED_SUFFIX
        RECORDKIT_SLOTS
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    synthesized_module: str = "recordkit.synthesized"
    builder_type_name: str = Field(default="Record", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    replaced_suffix: str = Field(default="Replaced", pattern=r"^[A-Za-z0-9_]*$")
    filtered_suffix: str = Field(default="Projection", pattern=r"^[A-Za-z0-9_]*$")
    slots: bool = True


@lru_cache(maxsize=1)
def get_settings() -> RecordKitSettings:
    """Access the process-wide settings, loaded once from the environment.

    Returns:
        The shared RecordKitSettings instance.
    """
    return RecordKitSettings()
