from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

from yard.errors import InvalidWeightError


def _new_load_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Load:
    """
    A single shipment. Never mutated after construction.

    Identity is `load_id` only: two loads with the same name and weight but
    different ids are different shipments.
    """

    name: str = field(compare=False)
    weight: int = field(compare=False)
    load_id: str = field(default_factory=_new_load_id)

    def __post_init__(self) -> None:
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidWeightError(f"Load {self.name!r}: weight must be an integer, got {self.weight!r}.")
        if self.weight <= 0:
            raise InvalidWeightError(f"Load {self.name!r}: weight must be > 0, got {self.weight}.")
