from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from yard.container import Container
from yard.load import Load
from yard.registry import TruckRegistry, default_registry
from yard.transfer import move_from_storage_to_truck, move_from_truck_to_storage

if TYPE_CHECKING:  # pragma: no cover
    from yard.storage import Storage


@dataclass(eq=False)
class Truck(Container):
    """
    Container that picks loads up from a storage and drops them off into one.

    A registration is claimed in `registry`, or in `default_registry()` when
    none is given; a reused registration raises DuplicateIdentifierError.
    """

    registration: Optional[str] = None
    registry: Optional[TruckRegistry] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.registration is None:
            return
        if self.registry is None:
            self.registry = default_registry()
        self.registry.claim(self.registration)

    def pick_up(self, load: Load, storage: Storage) -> bool:
        return move_from_storage_to_truck(load, storage, self)

    def drop_off(self, load: Load, storage: Storage) -> bool:
        return move_from_truck_to_storage(load, self, storage)

    @property
    def label(self) -> str:
        return f"Truck[{self.registration}]" if self.registration else "Truck"
