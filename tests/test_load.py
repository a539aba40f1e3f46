from __future__ import annotations

import dataclasses

import pytest

from yard.errors import InvalidWeightError, YardError
from yard.load import Load


@pytest.mark.parametrize("weight", [0, -1, -500])
def test_non_positive_weight_rejected(weight: int) -> None:
    with pytest.raises(InvalidWeightError):
        Load(name="A", weight=weight)


@pytest.mark.parametrize("weight", [1.5, "10", True, None])
def test_non_integer_weight_rejected(weight: object) -> None:
    with pytest.raises(InvalidWeightError):
        Load(name="A", weight=weight)  # type: ignore[arg-type]


def test_invalid_weight_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Load(name="A", weight=0)
    assert issubclass(InvalidWeightError, YardError)


def test_identity_is_by_id_only() -> None:
    a = Load(name="A", weight=30)
    b = Load(name="A", weight=30)
    assert a != b
    assert len({a, b}) == 2

    twin = Load(name="renamed", weight=99, load_id=a.load_id)
    assert twin == a
    assert hash(twin) == hash(a)


def test_ids_are_assigned_and_unique() -> None:
    ids = {Load(name=f"L{i}", weight=1).load_id for i in range(100)}
    assert len(ids) == 100


def test_load_is_immutable() -> None:
    load = Load(name="A", weight=30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        load.weight = 10  # type: ignore[misc]
