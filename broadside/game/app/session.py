"""Per-player session settings and statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from broadside.game.ai.difficulty import Difficulty
from broadside.game.core.models import DEFAULT_FLEET

DEFAULT_NICKNAME = "Admiral"
_FLEET_SIZE = len(DEFAULT_FLEET)


@dataclass(slots=True)
class SessionStats:
    """Nickname, difficulty and running battle statistics.

    Owned by the controller and handed to whichever collaborator needs it.
    """

    nickname: str = DEFAULT_NICKNAME
    difficulty: Difficulty = Difficulty.EASY
    enemy_ships_destroyed: int = 0
    player_ships_destroyed: int = 0
    shots_fired: int = 0
    successful_hits: int = 0
    started_at: datetime = field(default_factory=datetime.now)

    @property
    def accuracy(self) -> float:
        """Percentage of player shots that hit, 0 when nothing was fired."""
        if self.shots_fired == 0:
            return 0.0
        return self.successful_hits * 100.0 / self.shots_fired

    def set_nickname(self, nickname: str | None) -> None:
        """Update the nickname; blank values are ignored."""
        if nickname is not None and nickname.strip():
            self.nickname = nickname.strip()

    def record_player_shot(self, hit: bool) -> None:
        self.shots_fired += 1
        if hit:
            self.successful_hits += 1

    def reset_statistics(self) -> None:
        """Clear counters and restart the clock, keeping player settings."""
        self.enemy_ships_destroyed = 0
        self.player_ships_destroyed = 0
        self.shots_fired = 0
        self.successful_hits = 0
        self.started_at = datetime.now()

    def reset(self) -> None:
        """Restore every field to its default."""
        self.nickname = DEFAULT_NICKNAME
        self.difficulty = Difficulty.EASY
        self.reset_statistics()

    def is_valid(self) -> bool:
        if not self.nickname.strip():
            return False
        if not 0 <= self.enemy_ships_destroyed <= _FLEET_SIZE:
            return False
        if not 0 <= self.player_ships_destroyed <= _FLEET_SIZE:
            return False
        if self.shots_fired < 0 or self.successful_hits < 0:
            return False
        return self.successful_hits <= self.shots_fired

    def summary(self) -> str:
        lines = [
            "=== GAME SESSION ===",
            f"Player: {self.nickname}",
            f"Difficulty: {self.difficulty.value}",
            f"Enemy Ships Destroyed: {self.enemy_ships_destroyed}/{_FLEET_SIZE}",
            f"Player Ships Destroyed: {self.player_ships_destroyed}/{_FLEET_SIZE}",
            f"Total Shots Fired: {self.shots_fired}",
            f"Successful Hits: {self.successful_hits}",
            f"Accuracy: {self.accuracy:.1f}%",
            f"Started: {self.started_at:%Y-%m-%d %H:%M:%S}",
        ]
        return "\n".join(lines) + "\n"
