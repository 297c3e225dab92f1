"""Save-game data schema and validation helpers."""

from __future__ import annotations

import numpy as np

from broadside.game.core.board import Board
from broadside.game.core.models import CELL_COUNT, CellState, Coord, ShipType
from broadside.game.core.ship import Ship
from broadside.game.core.snapshot import GameSnapshot

SCHEMA_VERSION = 1
_OCCUPIED_STATES = frozenset({CellState.SHIP, CellState.HIT, CellState.SUNK})


def snapshot_to_payload(snapshot: GameSnapshot) -> dict[str, object]:
    """Convert a game snapshot to a JSON-serializable payload."""
    return {
        "version": SCHEMA_VERSION,
        "is_player_turn": snapshot.is_player_turn,
        "player_board": board_to_payload(snapshot.player_board),
        "machine_board": board_to_payload(snapshot.machine_board),
    }


def payload_to_snapshot(payload: dict[str, object]) -> GameSnapshot:
    """Convert a loaded payload into a game snapshot."""
    raw_version = payload.get("version", -1)
    if not isinstance(raw_version, (int, str)):
        raise ValueError("Save version must be int-compatible.")
    if int(raw_version) != SCHEMA_VERSION:
        raise ValueError("Unsupported save version.")
    is_player_turn = payload.get("is_player_turn", True)
    if not isinstance(is_player_turn, bool):
        raise ValueError("is_player_turn must be a boolean.")
    return GameSnapshot(
        player_board=payload_to_board(payload.get("player_board")),
        machine_board=payload_to_board(payload.get("machine_board")),
        is_player_turn=is_player_turn,
    )


def board_to_payload(board: Board) -> dict[str, object]:
    return {
        "cells": [int(value) for value in board.cells],
        "ships": [
            {
                "type": ship.ship_type.value,
                "length": ship.length,
                "hits": ship.hits,
                "cells": [[cell.row, cell.col] for cell in ship.cells],
            }
            for ship in board.ships
        ],
    }


def payload_to_board(payload: object) -> Board:
    if not isinstance(payload, dict):
        raise ValueError("Board payload must be an object.")
    raw_cells = payload.get("cells")
    if not isinstance(raw_cells, list) or len(raw_cells) != CELL_COUNT:
        raise ValueError(f"Board cells must be a list of {CELL_COUNT} states.")
    try:
        states = [CellState(int(value)) for value in raw_cells]
    except (TypeError, ValueError) as exc:
        raise ValueError("Malformed cell state in board payload.") from exc

    raw_ships = payload.get("ships")
    if not isinstance(raw_ships, list):
        raise ValueError("Board ships must be a list.")

    board = Board(cells=np.array(states, dtype=np.int8))
    for item in raw_ships:
        ship = _payload_to_ship(item)
        for cell in ship.cells:
            if cell.index in board.occupancy:
                raise ValueError("Ships overlap in board payload.")
            if states[cell.index] not in _OCCUPIED_STATES:
                raise ValueError(f"Cell {cell} is not marked as a ship cell.")
            board.occupancy[cell.index] = ship
        _check_damage(ship, states)
        board.fleet.append(ship)

    for index, state in enumerate(states):
        if state in _OCCUPIED_STATES and index not in board.occupancy:
            raise ValueError(f"Cell {Coord.from_index(index)} has no owning ship.")
    return board


def _payload_to_ship(item: object) -> Ship:
    if not isinstance(item, dict):
        raise ValueError("Each ship must be an object.")
    try:
        ship_type = ShipType(str(item["type"]))
        length = int(item["length"])
        hits = int(item["hits"])
        raw_cells = item["cells"]
        if not isinstance(raw_cells, list):
            raise ValueError("Ship cells must be a list.")
        cells = [Coord(int(cell[0]), int(cell[1])) for cell in raw_cells]
    except (KeyError, TypeError, ValueError, IndexError) as exc:
        raise ValueError("Malformed ship entry in board payload.") from exc
    if length < 0 or hits < 0 or len(cells) != length:
        raise ValueError("Ship length, hits and cells are inconsistent.")
    if any(not cell.in_bounds() for cell in cells):
        raise ValueError("Ship cell out of bounds.")
    return Ship(ship_type=ship_type, length=length, cells=cells, hits=hits)


def _check_damage(ship: Ship, states: list[CellState]) -> None:
    ship_states = [states[cell.index] for cell in ship.cells]
    damaged = sum(1 for state in ship_states if state is not CellState.SHIP)
    if ship.hits != damaged:
        raise ValueError(f"{ship.ship_type.value} hits do not match its damaged cells.")
    sunk_cells = sum(1 for state in ship_states if state is CellState.SUNK)
    expected = ship.length if ship.is_sunk else 0
    if sunk_cells != expected:
        raise ValueError(f"{ship.ship_type.value} sunk state does not match its cells.")
