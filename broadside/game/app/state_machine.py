"""Game phases for placement, battle and result."""

from enum import Enum, auto


class GamePhase(Enum):
    """Top-level game phases."""

    PLACEMENT = auto()
    PLAYER_TURN = auto()
    AI_TURN = auto()
    PLAYER_WON = auto()
    PLAYER_LOST = auto()

    @property
    def is_battle(self) -> bool:
        return self in (GamePhase.PLAYER_TURN, GamePhase.AI_TURN)

    @property
    def is_over(self) -> bool:
        return self in (GamePhase.PLAYER_WON, GamePhase.PLAYER_LOST)
