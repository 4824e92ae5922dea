"""Grid - bounded 2D single-occupancy index with Moore neighbourhoods."""
from __future__ import annotations

from typing import Any, Iterator

from ecosim.types import ConfigError, InvariantViolation, Location

# Row-major Moore offsets; this order decides which prey is found first.
_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Grid:
    def __init__(self, depth: int, width: int) -> None:
        if depth <= 0 or width <= 0:
            raise ConfigError(
                f"grid dimensions must be positive, got {depth}x{width}"
            )
        self._depth = depth
        self._width = width
        self._cells: dict[Location, Any] = {}

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self._depth and 0 <= location.col < self._width

    def _check_bounds(self, location: Location) -> None:
        if not self.in_bounds(location):
            raise InvariantViolation(
                f"{location} out of bounds for {self._depth}x{self._width} grid"
            )

    def place(self, occupant: Any, location: Location) -> None:
        """Put ``occupant`` at ``location``, replacing any previous reference."""
        self._check_bounds(location)
        self._cells[location] = occupant

    def clear(self, location: Location) -> None:
        self._check_bounds(location)
        self._cells.pop(location, None)

    def clear_all(self) -> None:
        self._cells.clear()

    def occupant_at(self, location: Location) -> Any | None:
        return self._cells.get(location)

    def adjacent_locations(self, location: Location) -> list[Location]:
        result: list[Location] = []
        for dr, dc in _OFFSETS:
            neighbour = Location(location.row + dr, location.col + dc)
            if self.in_bounds(neighbour):
                result.append(neighbour)
        return result

    def free_adjacent_locations(self, location: Location) -> list[Location]:
        return [
            loc for loc in self.adjacent_locations(location)
            if loc not in self._cells
        ]

    def free_adjacent_location(self, location: Location) -> Location | None:
        for loc in self.adjacent_locations(location):
            if loc not in self._cells:
                return loc
        return None

    def occupied(self) -> Iterator[tuple[Location, Any]]:
        """Yield ``(location, occupant)`` pairs in row-major order."""
        for location in sorted(self._cells, key=lambda loc: (loc.row, loc.col)):
            yield location, self._cells[location]

    def __len__(self) -> int:
        return len(self._cells)
