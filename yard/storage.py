from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yard.container import Container
from yard.load import Load
from yard.transfer import move_from_storage_to_truck, move_from_truck_to_storage

if TYPE_CHECKING:  # pragma: no cover
    from yard.truck import Truck


@dataclass(eq=False)
class Storage(Container):
    """Warehouse that loads are unloaded into and picked up from."""

    name: str = ""

    def put_in_truck(self, load: Load, truck: Truck) -> bool:
        return move_from_storage_to_truck(load, self, truck)

    def take_from_truck(self, load: Load, truck: Truck) -> bool:
        return move_from_truck_to_storage(load, truck, self)

    @property
    def label(self) -> str:
        return f"Storage[{self.name}]" if self.name else "Storage"
