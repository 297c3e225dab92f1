"""Medium AI: probe around the most recent hit."""

from __future__ import annotations

import logging
import random

from broadside.game.ai.strategy import ShootingStrategy
from broadside.game.core.board import Board
from broadside.game.core.models import Coord

logger = logging.getLogger(__name__)


class AdjacentStrategy(ShootingStrategy):
    """Fires next to the last hit until its neighbours run out, then goes random."""

    def __init__(self, rng: random.Random) -> None:
        super().__init__(rng)
        self._last_hit: Coord | None = None

    @property
    def last_hit(self) -> Coord | None:
        return self._last_hit

    def next_shot(self, board: Board) -> Coord:
        if self._last_hit is not None:
            for cell in self._last_hit.neighbors():
                if board.is_eligible(cell):
                    return cell
            logger.debug("adjacent_exhausted around=%s", self._last_hit)
            self._last_hit = None
        return self.random_shot(board)

    def on_hit(self, coord: Coord) -> None:
        self._last_hit = coord

    def on_reset(self) -> None:
        self._last_hit = None
