from __future__ import annotations

from yard.errors import DuplicateIdentifierError


class TruckRegistry:
    """
    Set of truck registrations in use.

    Owned by whoever builds trucks (usually a Yard) instead of living on the
    Truck class, so separate yards and separate tests never see each other's ids.
    """

    def __init__(self) -> None:
        self._used: set[str] = set()

    def claim(self, registration: str) -> None:
        if registration in self._used:
            raise DuplicateIdentifierError(registration)
        self._used.add(registration)

    def release(self, registration: str) -> bool:
        if registration not in self._used:
            return False
        self._used.discard(registration)
        return True

    def clear(self) -> None:
        self._used.clear()

    def __contains__(self, registration: object) -> bool:
        return registration in self._used

    def __len__(self) -> int:
        return len(self._used)


_default_registry = TruckRegistry()


def default_registry() -> TruckRegistry:
    """Registry used by trucks built with a registration but no explicit registry."""
    return _default_registry
