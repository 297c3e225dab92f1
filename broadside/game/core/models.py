"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_SIZE = 10
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class CellState(IntEnum):
    """State of a single board cell."""

    WATER = 0
    SHIP = 1
    HIT = 2
    MISS = 3
    SUNK = 4

    @property
    def is_eligible(self) -> bool:
        """Return whether a cell in this state was never targeted."""
        return self in (CellState.WATER, CellState.SHIP)


class ShipType(StrEnum):
    """Ship classes of the standard fleet."""

    CARRIER = "CARRIER"
    SUBMARINE = "SUBMARINE"
    DESTROYER = "DESTROYER"
    FRIGATE = "FRIGATE"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.CARRIER: 4,
    ShipType.SUBMARINE: 3,
    ShipType.DESTROYER: 2,
    ShipType.FRIGATE: 1,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.CARRIER,
    ShipType.SUBMARINE,
    ShipType.SUBMARINE,
    ShipType.DESTROYER,
    ShipType.DESTROYER,
    ShipType.DESTROYER,
    ShipType.FRIGATE,
    ShipType.FRIGATE,
    ShipType.FRIGATE,
    ShipType.FRIGATE,
)


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    REPEAT = "REPEAT"
    INVALID = "INVALID"

    @property
    def is_hit(self) -> bool:
        return self in (ShotResult.HIT, ShotResult.SUNK)

    @property
    def consumed(self) -> bool:
        """Return whether the shot was actually applied to a board."""
        return self not in (ShotResult.REPEAT, ShotResult.INVALID)


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    @property
    def index(self) -> int:
        """Flat cell index used by the board array."""
        return self.row * BOARD_SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> Coord:
        row, col = divmod(index, BOARD_SIZE)
        return cls(row, col)

    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def neighbors(self) -> list[Coord]:
        """Return in-bounds N/S/W/E neighbours in that order."""
        candidates = (
            Coord(self.row - 1, self.col),
            Coord(self.row + 1, self.col),
            Coord(self.row, self.col - 1),
            Coord(self.row, self.col + 1),
        )
        return [cell for cell in candidates if cell.in_bounds()]


@dataclass(frozen=True, slots=True)
class ShipRenderInfo:
    """Drawing hints for one cell covered by a ship."""

    ship_type: ShipType
    position: int
    length: int
    horizontal: bool


def cells_for_placement(start: Coord, length: int, horizontal: bool) -> list[Coord]:
    """Compute the cells covered by a ship starting at ``start``."""
    result: list[Coord] = []
    for i in range(length):
        if horizontal:
            result.append(Coord(start.row, start.col + i))
        else:
            result.append(Coord(start.row + i, start.col))
    return result
