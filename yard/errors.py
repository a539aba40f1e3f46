"""Exception hierarchy for the yard model."""

from __future__ import annotations


class YardError(Exception):
    """Base exception for all yard errors."""


class InvalidWeightError(YardError, ValueError):
    """Load constructed with a non-positive or non-integer weight."""


class InvalidCapacityError(YardError, ValueError):
    """Container constructed with a negative or non-integer capacity."""


class DuplicateIdentifierError(YardError):
    """Truck registration already claimed in the registry.

    Recoverable: the caller can pick another registration and retry.
    """

    def __init__(self, registration: str) -> None:
        self.registration = registration
        super().__init__(f"registration {registration!r} is already in use")
