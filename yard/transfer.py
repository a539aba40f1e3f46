"""
Two-sided moves of a single Load between a Storage and a Truck.

Both sides are checked before either is mutated, so a refused move leaves
both containers untouched. The same Load value travels; it is never rebuilt
from its weight.
"""

from __future__ import annotations

import logging

from yard.container import Container
from yard.errors import YardError
from yard.load import Load

_logger = logging.getLogger(__name__)


def _move(load: Load, source: Container, target: Container) -> bool:
    if not source.holds(load):
        _logger.debug("move %s %s->%s refused: not present", load.name, source.label, target.label)
        return False
    if not target.can_accept(load, source=source):
        _logger.debug("move %s %s->%s refused: no room or held elsewhere", load.name, source.label, target.label)
        return False

    released = source.release(load)
    received = target.receive(load)
    if not (released and received):
        raise YardError(f"move of {load.name} {source.label}->{target.label} left containers inconsistent")
    _logger.debug("moved %s (%d) %s->%s", load.name, load.weight, source.label, target.label)
    return True


def move_from_storage_to_truck(load: Load, storage: Container, truck: Container) -> bool:
    """Pick-up: storage must hold `load` and `truck` must have room for it."""
    return _move(load, storage, truck)


def move_from_truck_to_storage(load: Load, truck: Container, storage: Container) -> bool:
    """Drop-off: truck must hold `load` and `storage` must have room for it."""
    return _move(load, truck, storage)
