"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from broadside.game.core.errors import InvalidPlacementError, PlacementError
from broadside.game.core.models import (
    CELL_COUNT,
    CellState,
    Coord,
    ShipRenderInfo,
    ShotResult,
    cells_for_placement,
)
from broadside.game.core.ship import Ship


@dataclass(slots=True)
class Board:
    """Numpy-backed 10x10 board with a cell index to ship lookup."""

    cells: np.ndarray = field(
        default_factory=lambda: np.full(CELL_COUNT, CellState.WATER, dtype=np.int8)
    )
    occupancy: dict[int, Ship] = field(default_factory=dict)
    fleet: list[Ship] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.cells.shape != (CELL_COUNT,):
            self.cells = np.full(CELL_COUNT, CellState.WATER, dtype=np.int8)

    @property
    def ships(self) -> tuple[Ship, ...]:
        """Placed ships in placement order."""
        return tuple(self.fleet)

    def copy(self) -> Board:
        """Return an independent board with its own ships and occupancy."""
        clone = Board(cells=self.cells.copy())
        for ship in self.fleet:
            twin = Ship(ship.ship_type, ship.length, cells=list(ship.cells), hits=ship.hits)
            for cell in twin.cells:
                clone.occupancy[cell.index] = twin
            clone.fleet.append(twin)
        return clone

    def state_at(self, coord: Coord) -> CellState:
        if not coord.in_bounds():
            raise IndexError(f"Coordinate out of bounds: {coord}.")
        return CellState(int(self.cells[coord.index]))

    def ship_at(self, coord: Coord) -> Ship | None:
        if not coord.in_bounds():
            return None
        return self.occupancy.get(coord.index)

    def is_eligible(self, coord: Coord) -> bool:
        """Return whether the cell is in bounds and was never targeted."""
        return coord.in_bounds() and self.state_at(coord).is_eligible

    def eligible_cells(self) -> list[Coord]:
        """Return never-targeted cells in row-major order."""
        indexes = np.flatnonzero(self.cells <= CellState.SHIP)
        return [Coord.from_index(int(i)) for i in indexes]

    def cells_in(self, state: CellState) -> list[Coord]:
        return [Coord.from_index(int(i)) for i in np.flatnonzero(self.cells == state)]

    def can_place(self, length: int, start: Coord, horizontal: bool) -> bool:
        """Return whether a placement is valid and non-overlapping."""
        return self._placement_error(length, start, horizontal) is None

    def place_ship(self, ship: Ship, start: Coord, horizontal: bool) -> None:
        """Place a ship on the board, raising InvalidPlacementError if it does not fit."""
        error = self._placement_error(ship.length, start, horizontal)
        if error is not None:
            raise InvalidPlacementError(error)
        for cell in cells_for_placement(start, ship.length, horizontal):
            self.cells[cell.index] = CellState.SHIP
            self.occupancy[cell.index] = ship
            ship.add_cell(cell)
        self.fleet.append(ship)

    def resolve_shot(self, coord: Coord) -> ShotResult:
        """Apply a shot and return its result."""
        if not coord.in_bounds():
            return ShotResult.INVALID
        state = self.state_at(coord)
        if not state.is_eligible:
            return ShotResult.REPEAT

        if state is CellState.WATER:
            self.cells[coord.index] = CellState.MISS
            return ShotResult.MISS

        self.cells[coord.index] = CellState.HIT
        ship = self.occupancy[coord.index]
        ship.register_hit()
        if ship.is_sunk:
            for cell in ship.cells:
                self.cells[cell.index] = CellState.SUNK
            return ShotResult.SUNK
        return ShotResult.HIT

    def is_fleet_destroyed(self) -> bool:
        """Return whether no un-hit ship cell remains."""
        return not bool(np.any(self.cells == CellState.SHIP))

    def sunk_ship_count(self) -> int:
        return sum(1 for ship in self.fleet if ship.is_sunk)

    def render_info(self, coord: Coord) -> ShipRenderInfo | None:
        """Return drawing hints for the ship covering ``coord``, if any."""
        ship = self.ship_at(coord)
        if ship is None:
            return None
        return ShipRenderInfo(
            ship_type=ship.ship_type,
            position=ship.cells.index(coord),
            length=ship.length,
            horizontal=_is_horizontal(ship),
        )

    def _placement_error(
        self, length: int, start: Coord, horizontal: bool
    ) -> PlacementError | None:
        cells = cells_for_placement(start, length, horizontal)
        if any(not cell.in_bounds() for cell in cells):
            return PlacementError.OUT_OF_BOUNDS
        if any(self.cells[cell.index] != CellState.WATER for cell in cells):
            return PlacementError.OVERLAP
        return None


def _is_horizontal(ship: Ship) -> bool:
    if len(ship.cells) < 2:
        return True
    return ship.cells[0].row == ship.cells[1].row
