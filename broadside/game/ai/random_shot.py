"""Easy AI: uniform random shots."""

from __future__ import annotations

from broadside.game.ai.strategy import ShootingStrategy
from broadside.game.core.board import Board
from broadside.game.core.models import Coord


class RandomStrategy(ShootingStrategy):
    """Shoots at random never-targeted cells without any memory."""

    def next_shot(self, board: Board) -> Coord:
        return self.random_shot(board)
