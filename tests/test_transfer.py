from __future__ import annotations

import pytest

from yard.errors import YardError
from yard.load import Load
from yard.storage import Storage
from yard.transfer import move_from_storage_to_truck, move_from_truck_to_storage
from yard.truck import Truck


def test_storage_to_truck_scenario() -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)

    assert storage.receive(load) is True
    assert storage.current_weight == 30

    assert move_from_storage_to_truck(load, storage, truck) is True
    assert storage.current_weight == 0
    assert truck.current_weight == 30
    assert load in truck
    assert load not in storage


def test_moves_the_same_load() -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)
    storage.receive(load)

    move_from_storage_to_truck(load, storage, truck)
    (moved,) = truck.held_loads
    assert moved is load

    move_from_truck_to_storage(load, truck, storage)
    (back,) = storage.held_loads
    assert back is load


def test_truck_without_room_leaves_both_sides_untouched() -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    already = Load(name="already", weight=40)
    load = Load(name="A", weight=30)
    truck.receive(already)
    storage.receive(load)

    assert move_from_storage_to_truck(load, storage, truck) is False
    assert storage.held_loads == frozenset({load})
    assert storage.current_weight == 30
    assert truck.held_loads == frozenset({already})
    assert truck.current_weight == 40


def test_storage_without_room_leaves_both_sides_untouched() -> None:
    storage = Storage(capacity=20)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)
    truck.receive(load)

    assert move_from_truck_to_storage(load, truck, storage) is False
    assert truck.current_weight == 30
    assert storage.current_weight == 0


def test_load_not_present_in_source() -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)

    assert move_from_storage_to_truck(load, storage, truck) is False
    assert move_from_truck_to_storage(load, truck, storage) is False
    assert storage.current_weight == 0
    assert truck.current_weight == 0


def test_round_trip_between_containers() -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)
    storage.receive(load)

    assert move_from_storage_to_truck(load, storage, truck) is True
    assert move_from_truck_to_storage(load, truck, storage) is True
    assert storage.current_weight == 30
    assert truck.current_weight == 0
    # nothing left on the truck to drop a second time
    assert move_from_truck_to_storage(load, truck, storage) is False


def test_exclusivity_across_many_moves() -> None:
    storage = Storage(capacity=200)
    truck = Truck(capacity=60)
    loads = [Load(name=f"L{i}", weight=w) for i, w in enumerate([10, 25, 40, 15, 30])]
    for load in loads:
        storage.receive(load)

    for load in loads:
        move_from_storage_to_truck(load, storage, truck)
        assert not (storage.held_loads & truck.held_loads)
        assert truck.current_weight <= truck.capacity
    for load in loads[:2]:
        move_from_truck_to_storage(load, truck, storage)
        assert not (storage.held_loads & truck.held_loads)

    assert storage.current_weight + truck.current_weight == sum(load.weight for load in loads)


class TestContainerConveniences:
    def test_truck_pick_up_and_drop_off(self) -> None:
        storage = Storage(capacity=100, name="depot")
        truck = Truck(capacity=50)
        load = Load(name="A", weight=30)
        storage.receive(load)

        assert truck.pick_up(load, storage) is True
        assert truck.pick_up(load, storage) is False
        assert truck.drop_off(load, storage) is True
        assert storage.current_weight == 30

    def test_storage_put_in_truck_and_take_from_truck(self) -> None:
        storage = Storage(capacity=100)
        truck = Truck(capacity=50)
        load = Load(name="A", weight=30)
        storage.receive(load)

        assert storage.put_in_truck(load, truck) is True
        assert truck.current_weight == 30
        assert storage.take_from_truck(load, truck) is True
        assert truck.current_weight == 0
        assert storage.current_weight == 30


def test_standalone_containers_never_share_a_load() -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)

    assert storage.receive(load) is True
    assert truck.can_accept(load) is False
    assert truck.receive(load) is False
    assert truck.current_weight == 0
    assert not (storage.held_loads & truck.held_loads)

    assert move_from_storage_to_truck(load, storage, truck) is True
    assert storage.receive(load) is False
    assert storage.current_weight == 0


def test_failed_receive_after_release_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    storage = Storage(capacity=100)
    truck = Truck(capacity=50)
    load = Load(name="A", weight=30)
    storage.receive(load)
    monkeypatch.setattr(truck, "receive", lambda _load: False)

    with pytest.raises(YardError):
        move_from_storage_to_truck(load, storage, truck)
