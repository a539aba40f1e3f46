from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from yard.errors import InvalidCapacityError, YardError
from yard.load import Load
from yard.placement import PlacementIndex, default_placements

_logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Container:
    """
    Capacity-bounded holder of loads. Shared base of Truck and Storage.

    Invariants kept by every method:
    - current_weight == sum of the held loads' weights
    - current_weight <= capacity
    - a load is held by at most one container of the same placement index

    Refusals (no room, load already held, load not held) are ordinary outcomes
    and are reported as False, never raised.
    """

    capacity: int

    _loads: dict[str, Load] = field(default_factory=dict, init=False, repr=False)
    _current_weight: int = field(default=0, init=False, repr=False)
    _placements: PlacementIndex = field(default_factory=default_placements, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise InvalidCapacityError(f"capacity must be an integer, got {self.capacity!r}.")
        if self.capacity < 0:
            raise InvalidCapacityError(f"capacity must be >= 0, got {self.capacity}.")

    def attach(self, placements: PlacementIndex) -> None:
        """Report to `placements` instead of the shared default index. Only while empty."""
        if self._loads:
            raise YardError(f"{self.label} holds loads; attach it before receiving any.")
        self._placements = placements

    # ---------- read-only state ----------
    @property
    def current_weight(self) -> int:
        return self._current_weight

    @property
    def held_loads(self) -> frozenset[Load]:
        return frozenset(self._loads.values())

    @property
    def free_capacity(self) -> int:
        return self.capacity - self._current_weight

    @property
    def placements(self) -> PlacementIndex:
        return self._placements

    def utilization(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return float(self._current_weight / self.capacity)

    def holds(self, load: Load) -> bool:
        return load.load_id in self._loads

    def __contains__(self, load: object) -> bool:
        return isinstance(load, Load) and self.holds(load)

    def __len__(self) -> int:
        return len(self._loads)

    def __iter__(self) -> Iterator[Load]:
        return iter(list(self._loads.values()))

    # ---------- capability ----------
    def has_room_for(self, load: Load) -> bool:
        """Capacity and own-membership check only."""
        return not self.holds(load) and self._current_weight + load.weight <= self.capacity

    def can_accept(self, load: Load, *, source: Optional[Container] = None) -> bool:
        """
        True iff the load fits, is not held here and is not held by any other
        container, except `source`, which is about to release it in a transfer.
        """
        if not self.has_room_for(load):
            return False
        holder = self._placements.holder_of(load)
        return holder is None or holder is source

    def receive(self, load: Load) -> bool:
        if not self.can_accept(load):
            _logger.debug("%s refused %s (weight=%d, free=%d)", self.label, load.name, load.weight, self.free_capacity)
            return False
        self._loads[load.load_id] = load
        self._current_weight += load.weight
        self._placements.record(load, self)
        return True

    def release(self, load: Load) -> bool:
        if not self.holds(load):
            _logger.debug("%s cannot release %s: not present", self.label, load.name)
            return False
        del self._loads[load.load_id]
        self._current_weight -= load.weight
        self._placements.discard(load, self)
        return True

    @property
    def label(self) -> str:
        return type(self).__name__
