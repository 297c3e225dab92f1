"""Serializable game state."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.core.board import Board


@dataclass(slots=True)
class GameSnapshot:
    """Everything needed to resume a battle."""

    player_board: Board
    machine_board: Board
    is_player_turn: bool = True
