from broadside.game.core.models import (
    DEFAULT_FLEET,
    CellState,
    Coord,
    ShipType,
    ShotResult,
    cells_for_placement,
)


def test_coord_is_value_type() -> None:
    assert Coord(3, 4) == Coord(3, 4)
    assert len({Coord(3, 4), Coord(3, 4), Coord(4, 3)}) == 2


def test_coord_index_round_trip_covers_whole_board() -> None:
    indexes = {Coord(r, c).index for r in range(10) for c in range(10)}
    assert indexes == set(range(100))
    assert Coord.from_index(57) == Coord(5, 7)


def test_coord_neighbors_are_bounds_checked() -> None:
    assert Coord(0, 0).neighbors() == [Coord(1, 0), Coord(0, 1)]
    assert Coord(5, 5).neighbors() == [Coord(4, 5), Coord(6, 5), Coord(5, 4), Coord(5, 6)]
    assert Coord(9, 9).neighbors() == [Coord(8, 9), Coord(9, 8)]


def test_default_fleet_composition() -> None:
    lengths = sorted((ship.size for ship in DEFAULT_FLEET), reverse=True)
    assert lengths == [4, 3, 3, 2, 2, 2, 1, 1, 1, 1]
    assert sum(lengths) == 20
    assert DEFAULT_FLEET[0] is ShipType.CARRIER


def test_cells_for_placement_orientation() -> None:
    assert cells_for_placement(Coord(2, 3), 3, True) == [Coord(2, 3), Coord(2, 4), Coord(2, 5)]
    assert cells_for_placement(Coord(2, 3), 2, False) == [Coord(2, 3), Coord(3, 3)]


def test_state_and_result_helpers() -> None:
    assert CellState.WATER.is_eligible and CellState.SHIP.is_eligible
    assert not any(state.is_eligible for state in (CellState.HIT, CellState.MISS, CellState.SUNK))
    assert ShotResult.SUNK.is_hit and not ShotResult.MISS.is_hit
    assert not ShotResult.REPEAT.consumed and not ShotResult.INVALID.consumed
