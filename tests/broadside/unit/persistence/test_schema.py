import random

import pytest

from broadside.game.core.board import Board
from broadside.game.core.fleet import random_board
from broadside.game.core.models import CellState, Coord, ShipType
from broadside.game.core.snapshot import GameSnapshot
from broadside.game.persistence.schema import (
    SCHEMA_VERSION,
    board_to_payload,
    payload_to_board,
    payload_to_snapshot,
    snapshot_to_payload,
)


def _played_board() -> Board:
    board = random_board(random.Random(21))
    carrier = next(ship for ship in board.ships if ship.ship_type is ShipType.CARRIER)
    board.resolve_shot(carrier.cells[0])
    frigate = next(ship for ship in board.ships if ship.ship_type is ShipType.FRIGATE)
    board.resolve_shot(frigate.cells[0])
    board.resolve_shot(board.cells_in(CellState.WATER)[0])
    return board


def test_snapshot_payload_preserves_ship_identity_and_hits() -> None:
    snapshot = GameSnapshot(_played_board(), random_board(random.Random(3)), is_player_turn=False)
    payload = snapshot_to_payload(snapshot)
    assert payload["version"] == SCHEMA_VERSION

    restored = payload_to_snapshot(payload)
    assert restored.is_player_turn is False
    board = restored.player_board
    assert (board.cells == snapshot.player_board.cells).all()
    assert board.sunk_ship_count() == 1
    carrier = next(ship for ship in board.ships if ship.ship_type is ShipType.CARRIER)
    assert carrier.hits == 1
    assert all(board.ship_at(cell) is carrier for cell in carrier.cells)


def test_board_payload_shape() -> None:
    payload = board_to_payload(_played_board())
    assert len(payload["cells"]) == 100
    assert len(payload["ships"]) == 10
    first = payload["ships"][0]
    assert first["type"] == "CARRIER"
    assert len(first["cells"]) == first["length"] == 4


def test_rejects_unknown_version() -> None:
    payload = snapshot_to_payload(GameSnapshot(Board(), Board()))
    payload["version"] = 99
    with pytest.raises(ValueError, match="version"):
        payload_to_snapshot(payload)


def test_rejects_non_bool_turn_flag() -> None:
    payload = snapshot_to_payload(GameSnapshot(Board(), Board()))
    payload["is_player_turn"] = "yes"
    with pytest.raises(ValueError):
        payload_to_snapshot(payload)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p.update(cells=p["cells"][:-1]),
        lambda p: p["cells"].__setitem__(0, 7),
        lambda p: p.update(ships="none"),
        lambda p: p["ships"][0].update(type="BATTLESHIP"),
        lambda p: p["ships"][0].update(length=9),
        lambda p: p["ships"][0]["cells"].__setitem__(0, [12, 0]),
        lambda p: p["ships"].append(dict(p["ships"][0])),
        lambda p: p["ships"].pop(),
    ],
    ids=[
        "short-cells",
        "bad-state",
        "ships-not-list",
        "unknown-type",
        "length-mismatch",
        "out-of-bounds",
        "overlap",
        "orphan-ship-cell",
    ],
)
def test_rejects_malformed_board(mutate) -> None:
    payload = board_to_payload(_played_board())
    mutate(payload)
    with pytest.raises(ValueError):
        payload_to_board(payload)


def test_rejects_ship_on_water_cell() -> None:
    board = Board()
    payload = board_to_payload(board)
    payload["ships"] = [{"type": "FRIGATE", "length": 1, "hits": 0, "cells": [[0, 0]]}]
    with pytest.raises(ValueError, match="not marked"):
        payload_to_board(payload)


def test_empty_board_round_trips() -> None:
    board = payload_to_board(board_to_payload(Board()))
    assert board.ships == ()
    assert board.state_at(Coord(0, 0)) is CellState.WATER


def _first_ship(payload: dict, ship_type: str) -> dict:
    return next(ship for ship in payload["ships"] if ship["type"] == ship_type)


def test_rejects_hit_count_that_disagrees_with_cells() -> None:
    payload = board_to_payload(_played_board())
    _first_ship(payload, "CARRIER")["hits"] = 0
    with pytest.raises(ValueError, match="hits"):
        payload_to_board(payload)


def test_rejects_sunk_cells_on_afloat_ship() -> None:
    payload = board_to_payload(_played_board())
    carrier = _first_ship(payload, "CARRIER")
    for row, col in carrier["cells"]:
        payload["cells"][row * 10 + col] = int(CellState.SUNK)
    with pytest.raises(ValueError, match="hits"):
        payload_to_board(payload)
    carrier["hits"] = 4
    assert payload_to_board(payload).sunk_ship_count() == 2


def test_rejects_sunk_ship_drawn_as_hit() -> None:
    payload = board_to_payload(_played_board())
    frigate = next(
        ship for ship in payload["ships"] if ship["type"] == "FRIGATE" and ship["hits"] == 1
    )
    row, col = frigate["cells"][0]
    payload["cells"][row * 10 + col] = int(CellState.HIT)
    with pytest.raises(ValueError, match="sunk state"):
        payload_to_board(payload)
