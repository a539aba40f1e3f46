from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from yard.load import Load

if TYPE_CHECKING:  # pragma: no cover
    from yard.container import Container


class PlacementIndex:
    """
    Load id -> container currently holding it.

    Every container reports to exactly one index. Containers built standalone
    share `default_placements()`; a Yard brings its own.
    """

    def __init__(self) -> None:
        self._holders: dict[str, Container] = {}

    def holder_of(self, load: Load) -> Optional[Container]:
        return self._holders.get(load.load_id)

    def record(self, load: Load, container: Container) -> None:
        self._holders[load.load_id] = container

    def discard(self, load: Load, container: Container) -> None:
        if self._holders.get(load.load_id) is container:
            del self._holders[load.load_id]

    def clear(self) -> None:
        self._holders.clear()

    def __len__(self) -> int:
        return len(self._holders)


_default_placements = PlacementIndex()


def default_placements() -> PlacementIndex:
    return _default_placements
