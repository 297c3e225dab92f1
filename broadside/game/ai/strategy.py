"""AI shooting strategy interface."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from broadside.game.core.board import Board
from broadside.game.core.models import Coord

FALLBACK_SHOT = Coord(0, 0)


class ShootingStrategy(ABC):
    """Picks the next coordinate to fire at an opponent board.

    The notification hooks are no-ops unless a strategy keeps state.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    @abstractmethod
    def next_shot(self, board: Board) -> Coord:
        """Return a never-targeted coordinate on ``board``."""

    def on_hit(self, coord: Coord) -> None:
        """Record that ``coord`` was a hit."""

    def on_sunk(self, cells: Sequence[Coord]) -> None:
        """Record that the ship covering ``cells`` went down."""

    def on_reset(self) -> None:
        """Forget everything learned in the current game."""

    def random_shot(self, board: Board) -> Coord:
        """Uniform pick among eligible cells."""
        candidates = board.eligible_cells()
        if not candidates:
            return FALLBACK_SHOT
        return self._rng.choice(candidates)
