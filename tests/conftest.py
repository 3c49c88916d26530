"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from collections.abc import Sized
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from recordkit import RecordKitSettings


@runtime_checkable
class Greeter(Protocol):
    def greet(self) -> str: ...


@dataclass
class English:
    name: str = "world"

    def greet(self) -> str:
        return f"hello {self.name}"


@dataclass
class FixtureSource:
    greeter: English
    items: list[int]
    count: int
    label: str
    anything: int


@dataclass
class FixtureTarget:
    greeter: Greeter
    items: Sized
    count: float
    label: str
    anything: Any
    extra: str = "untouched"


@dataclass
class FixtureTagged:
    id: int = field(metadata={"json": "id"})
    name: str = field(default="", metadata={"json": "name", "db": "user_name"})


@pytest.fixture
def source():
    return FixtureSource(
        greeter=English("ada"), items=[1, 2, 3], count=7, label="src", anything=99
    )


@pytest.fixture
def target():
    return FixtureTarget(
        greeter=None, items=None, count=0.0, label="", anything=None  # type: ignore[arg-type]
    )


@pytest.fixture
def tagged():
    return FixtureTagged(id=1, name="ada")


@pytest.fixture
def settings():
    """Settings isolated from RECORDKIT_* environment variables."""
    return RecordKitSettings(
        synthesized_module="tests.synthesized",
        builder_type_name="Built",
        replaced_suffix="Swapped",
        filtered_suffix="Slice",
        slots=False,
    )
