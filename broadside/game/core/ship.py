"""Ship entity and factory."""

from __future__ import annotations

from dataclasses import dataclass, field

from broadside.game.core.models import Coord, ShipType


@dataclass(slots=True, eq=False)
class Ship:
    """A ship tracked by identity; cells are filled in as it is placed."""

    ship_type: ShipType
    length: int
    cells: list[Coord] = field(default_factory=list)
    hits: int = 0

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("Ship length must be >= 0.")

    @classmethod
    def of(cls, ship_type: ShipType) -> Ship:
        """Build a ship with the standard length for its type."""
        return cls(ship_type=ship_type, length=ship_type.size)

    @property
    def is_sunk(self) -> bool:
        return self.hits >= self.length

    def register_hit(self) -> None:
        """Count a hit. Hitting a sunk ship again leaves it sunk."""
        self.hits += 1

    def add_cell(self, coord: Coord) -> None:
        self.cells.append(coord)


def create_ship(name: str) -> Ship:
    """Create a ship from a type name such as ``"carrier"``."""
    try:
        ship_type = ShipType(name.strip().upper())
    except ValueError as exc:
        raise ValueError(f"Unknown ship type: {name!r}.") from exc
    return Ship.of(ship_type)
