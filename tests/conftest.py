from __future__ import annotations

from typing import Iterator

import pytest

from yard.placement import default_placements
from yard.registry import TruckRegistry, default_registry
from yard.site import Yard


@pytest.fixture(autouse=True)
def fresh_defaults() -> Iterator[None]:
    default_registry().clear()
    default_placements().clear()
    yield
    default_registry().clear()
    default_placements().clear()


@pytest.fixture
def registry() -> TruckRegistry:
    return TruckRegistry()


@pytest.fixture
def yard(registry: TruckRegistry) -> Yard:
    return Yard(registry=registry)
