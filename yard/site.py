from __future__ import annotations

from typing import Optional

from yard.container import Container
from yard.load import Load
from yard.placement import PlacementIndex
from yard.registry import TruckRegistry
from yard.storage import Storage
from yard.truck import Truck


class Yard:
    """
    Builds the trucks and storages of one site, with its own truck registry
    and its own placement index, so one yard never sees another's loads or
    registrations.
    """

    def __init__(self, registry: Optional[TruckRegistry] = None, placements: Optional[PlacementIndex] = None):
        self.registry = registry if registry is not None else TruckRegistry()
        self.placements = placements if placements is not None else PlacementIndex()
        self.trucks: list[Truck] = []
        self.storages: list[Storage] = []

    def add_truck(self, capacity: int, registration: Optional[str] = None) -> Truck:
        truck = Truck(capacity=capacity, registration=registration, registry=self.registry)
        truck.attach(self.placements)
        self.trucks.append(truck)
        return truck

    def add_storage(self, capacity: int, name: str = "") -> Storage:
        storage = Storage(capacity=capacity, name=name)
        storage.attach(self.placements)
        self.storages.append(storage)
        return storage

    def location_of(self, load: Load) -> Optional[Container]:
        return self.placements.holder_of(load)

    def total_weight(self) -> int:
        return sum(c.current_weight for c in (*self.trucks, *self.storages))

    def __len__(self) -> int:
        return len(self.placements)
