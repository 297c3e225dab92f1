"""Difficulty levels and strategy selection."""

from __future__ import annotations

import random
from collections.abc import Callable
from enum import StrEnum

from broadside.game.ai.adjacent import AdjacentStrategy
from broadside.game.ai.hunt_target import HuntTargetStrategy
from broadside.game.ai.random_shot import RandomStrategy
from broadside.game.ai.strategy import ShootingStrategy


class Difficulty(StrEnum):
    """Selectable AI difficulty."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

    @classmethod
    def parse(cls, value: str | Difficulty | None) -> Difficulty:
        """Parse a level name in any case; unknown or empty text means EASY."""
        if isinstance(value, Difficulty):
            return value
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            return cls.EASY


_STRATEGIES: dict[Difficulty, Callable[[random.Random], ShootingStrategy]] = {
    Difficulty.EASY: RandomStrategy,
    Difficulty.MEDIUM: AdjacentStrategy,
    Difficulty.HARD: HuntTargetStrategy,
}


def build_strategy(difficulty: Difficulty | str, rng: random.Random) -> ShootingStrategy:
    """Construct a fresh strategy for the selected difficulty."""
    return _STRATEGIES[Difficulty.parse(difficulty)](rng)
