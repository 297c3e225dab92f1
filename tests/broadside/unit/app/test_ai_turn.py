import random

from broadside.game.ai.hunt_target import HuntTargetStrategy
from broadside.game.ai.strategy import ShootingStrategy
from broadside.game.app.ai_turn import ai_step
from broadside.game.core.board import Board
from broadside.game.core.models import CellState, Coord, ShipType, ShotResult
from broadside.game.core.ship import Ship


class _ScriptedStrategy(ShootingStrategy):
    def __init__(self, shots: list[Coord]) -> None:
        super().__init__(random.Random(0))
        self._shots = list(shots)
        self.hits: list[Coord] = []
        self.sunk: list[tuple[Coord, ...]] = []

    def next_shot(self, board: Board) -> Coord:
        return self._shots.pop(0)

    def on_hit(self, coord: Coord) -> None:
        self.hits.append(coord)

    def on_sunk(self, cells) -> None:
        self.sunk.append(tuple(cells))


def _board_with_destroyer() -> Board:
    board = Board()
    board.place_ship(Ship.of(ShipType.DESTROYER), Coord(0, 0), True)
    return board


def test_ai_step_miss_ends_turn() -> None:
    board = _board_with_destroyer()
    strategy = _ScriptedStrategy([Coord(9, 9)])
    shot = ai_step(board, strategy)
    assert shot.result is ShotResult.MISS
    assert shot.ends_turn
    assert strategy.hits == []


def test_ai_step_notifies_hit_then_sunk() -> None:
    board = _board_with_destroyer()
    strategy = _ScriptedStrategy([Coord(0, 0), Coord(0, 1)])
    first = ai_step(board, strategy)
    assert first.result is ShotResult.HIT and not first.ends_turn
    second = ai_step(board, strategy)
    assert second.result is ShotResult.SUNK
    assert second.sunk_cells == (Coord(0, 0), Coord(0, 1))
    assert strategy.hits == [Coord(0, 0), Coord(0, 1)]
    assert strategy.sunk == [(Coord(0, 0), Coord(0, 1))]


def test_ai_step_retries_repeat_picks() -> None:
    board = _board_with_destroyer()
    board.resolve_shot(Coord(5, 5))
    strategy = _ScriptedStrategy([Coord(5, 5), Coord(-1, 0), Coord(0, 0)])
    shot = ai_step(board, strategy)
    assert shot.coord == Coord(0, 0)
    assert board.state_at(Coord(5, 5)) is CellState.MISS


def test_ai_step_falls_back_after_stuck_strategy() -> None:
    board = _board_with_destroyer()
    board.resolve_shot(Coord(5, 5))
    strategy = _ScriptedStrategy([Coord(5, 5)] * 500)
    shot = ai_step(board, strategy)
    assert shot.coord == Coord(0, 0)
    assert shot.result is ShotResult.HIT


def test_ai_step_with_hunt_target_finishes_a_ship() -> None:
    board = Board()
    board.place_ship(Ship.of(ShipType.SUBMARINE), Coord(4, 4), False)
    board.resolve_shot(Coord(4, 4))
    strategy = HuntTargetStrategy(random.Random(9))
    strategy.on_hit(Coord(4, 4))
    results = [ai_step(board, strategy).result for _ in range(6)]
    assert ShotResult.SUNK in results
    assert board.is_fleet_destroyed()
