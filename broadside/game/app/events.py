"""Observer contract for game state changes."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class GameObserver(Protocol):
    """Receives notifications about board, shot, turn and result changes."""

    def on_board_changed(self, is_player_board: bool) -> None: ...

    def on_shot_fired(self, is_hit: bool, is_sunk: bool) -> None: ...

    def on_turn_changed(self, is_player_turn: bool) -> None: ...

    def on_game_over(self, player_won: bool) -> None: ...


class ObserverHub:
    """Fan-out of notifications to registered observers."""

    def __init__(self) -> None:
        self._observers: list[GameObserver] = []

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, observer: GameObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove(self, observer: GameObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def board_changed(self, is_player_board: bool) -> None:
        for observer in list(self._observers):
            observer.on_board_changed(is_player_board)

    def shot_fired(self, is_hit: bool, is_sunk: bool) -> None:
        for observer in list(self._observers):
            observer.on_shot_fired(is_hit, is_sunk)

    def turn_changed(self, is_player_turn: bool) -> None:
        for observer in list(self._observers):
            observer.on_turn_changed(is_player_turn)

    def game_over(self, player_won: bool) -> None:
        logger.info("game_over player_won=%s", player_won)
        for observer in list(self._observers):
            observer.on_game_over(player_won)
