"""Shared fixtures for the propath test suite."""

from __future__ import annotations

from typing import Any

import pytest

from path_helpers import Point, Slotted
from propath.types import MISSING, Arguments, SparseList


@pytest.fixture
def nested() -> dict[str, Any]:
    return {
        "a": {"b": {"c": 3}},
        "list": [{"name": "first"}, {"name": "second"}],
        "a.b": "flat",
        "nothing": None,
    }


@pytest.fixture
def sparse() -> SparseList:
    return SparseList.of(MISSING, MISSING, 3)


@pytest.fixture
def arguments() -> Arguments:
    return Arguments("x", "y")


@pytest.fixture
def point() -> Point:
    return Point(1, 2)


@pytest.fixture
def slotted() -> Slotted:
    return Slotted("s")
