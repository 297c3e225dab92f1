"""Game controller: placement, turn sequencing and game end."""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Callable

from broadside.engine.scheduler import Scheduler
from broadside.game.ai.difficulty import Difficulty, build_strategy
from broadside.game.ai.strategy import ShootingStrategy
from broadside.game.app.ai_turn import AiShot, ai_step
from broadside.game.app.events import GameObserver, ObserverHub
from broadside.game.app.session import SessionStats
from broadside.game.app.state_machine import GamePhase
from broadside.game.core.board import Board
from broadside.game.core.errors import InvalidPlacementError, PlacementError
from broadside.game.core.fleet import build_fleet, place_fleet_randomly, random_board
from broadside.game.core.models import Coord, ShipRenderInfo, ShotResult
from broadside.game.core.ship import Ship
from broadside.game.core.snapshot import GameSnapshot
from broadside.game.infra.config import GameConfig
from broadside.game.persistence.service import SaveService

logger = logging.getLogger(__name__)

AiStepCallback = Callable[[AiShot], None]


class GameController:
    """Owns both boards and the active AI strategy and drives the game phases.

    The AI turn runs as scheduled steps on ``scheduler``; the host advances the
    scheduler from its own loop (``advance``) or finishes the turn at once
    (``drain_ai_turn``). Player shots are rejected until the AI turn is over.
    """

    def __init__(
        self,
        rng: random.Random,
        *,
        config: GameConfig | None = None,
        stats: SessionStats | None = None,
        save_service: SaveService | None = None,
        scheduler: Scheduler | None = None,
        on_ai_step: AiStepCallback | None = None,
    ) -> None:
        self._rng = rng
        self._config = config or GameConfig()
        self._stats = stats or SessionStats(
            nickname=self._config.nickname, difficulty=self._config.difficulty
        )
        self._save_service = save_service
        self._scheduler = scheduler or Scheduler()
        self._on_ai_step = on_ai_step
        self._observers = ObserverHub()

        self._strategy: ShootingStrategy = build_strategy(self._stats.difficulty, rng)
        self._player_board = Board()
        self._machine_board = Board()
        self._ships_to_place: deque[Ship] = build_fleet()
        self._phase = GamePhase.PLACEMENT
        self._ai_task: int | None = None
        self._ai_turn_shots: list[AiShot] = []

    @property
    def player_board(self) -> Board:
        return self._player_board

    @property
    def machine_board(self) -> Board:
        return self._machine_board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_player_turn(self) -> bool:
        return self._phase is GamePhase.PLAYER_TURN

    @property
    def is_game_over(self) -> bool:
        return self._phase.is_over

    @property
    def stats(self) -> SessionStats:
        return self._stats

    @property
    def difficulty(self) -> Difficulty:
        return self._stats.difficulty

    @property
    def strategy(self) -> ShootingStrategy:
        return self._strategy

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def last_ai_turn(self) -> tuple[AiShot, ...]:
        """Shots taken during the most recent AI turn, in order."""
        return tuple(self._ai_turn_shots)

    def set_on_ai_step(self, callback: AiStepCallback | None) -> None:
        self._on_ai_step = callback

    def add_observer(self, observer: GameObserver) -> None:
        self._observers.add(observer)

    def remove_observer(self, observer: GameObserver) -> None:
        self._observers.remove(observer)

    def set_difficulty(self, level: Difficulty | str) -> None:
        """Swap in a fresh strategy for ``level``; no state carries over."""
        difficulty = Difficulty.parse(level)
        self._stats.difficulty = difficulty
        self._strategy = build_strategy(difficulty, self._rng)
        logger.info("difficulty_changed level=%s", difficulty.value)

    def start_new_game(self) -> None:
        """Begin a fresh game with cleared statistics."""
        self._stats.reset_statistics()
        self.reset_game()

    def reset_game(self) -> None:
        """Clear both boards and return to placement."""
        self._cancel_ai_turn()
        self._player_board = Board()
        self._machine_board = Board()
        self._ships_to_place = build_fleet()
        self._strategy.on_reset()
        self._phase = GamePhase.PLACEMENT
        logger.info("game_reset difficulty=%s", self._stats.difficulty.value)
        self._observers.board_changed(True)
        self._observers.board_changed(False)

    def next_ship_to_place(self) -> Ship | None:
        return self._ships_to_place[0] if self._ships_to_place else None

    def place_ship(self, start: Coord, length: int, horizontal: bool) -> Ship:
        """Place the next queued ship on the player board.

        Raises InvalidPlacementError (OUT_OF_BOUNDS, OVERLAP or FLEET_COMPLETE);
        the queue is untouched on failure so the caller can retry.
        """
        if self._phase is not GamePhase.PLACEMENT or not self._ships_to_place:
            raise InvalidPlacementError(PlacementError.FLEET_COMPLETE)
        ship = self._ships_to_place[0]
        if length != ship.length:
            raise ValueError(f"Next ship is {ship.ship_type.value} of length {ship.length}.")
        self._player_board.place_ship(ship, start, horizontal)
        self._ships_to_place.popleft()
        logger.debug(
            "ship_placed type=%s start=%s horizontal=%s", ship.ship_type.value, start, horizontal
        )
        self._observers.board_changed(True)
        if not self._ships_to_place:
            self._begin_battle()
        return ship

    def place_player_fleet_randomly(self) -> None:
        """Place every ship still waiting in the queue at random."""
        if self._phase is not GamePhase.PLACEMENT or not self._ships_to_place:
            raise InvalidPlacementError(PlacementError.FLEET_COMPLETE)
        place_fleet_randomly(self._player_board, self._rng, self._ships_to_place)
        self._ships_to_place.clear()
        self._observers.board_changed(True)
        self._begin_battle()

    def shoot(self, target: Coord) -> ShotResult:
        """Fire the player's shot at the machine board.

        INVALID and REPEAT results are no-ops that do not consume the turn.
        """
        if self._phase is not GamePhase.PLAYER_TURN:
            logger.debug("shot_rejected phase=%s target=%s", self._phase.name, target)
            return ShotResult.INVALID
        result = self._machine_board.resolve_shot(target)
        if not result.consumed:
            return result

        self._stats.record_player_shot(result.is_hit)
        self._stats.enemy_ships_destroyed = self._machine_board.sunk_ship_count()
        logger.info("player_shot target=%s result=%s", target, result.value)
        self._observers.shot_fired(result.is_hit, result is ShotResult.SUNK)
        self._observers.board_changed(False)

        if self._machine_board.is_fleet_destroyed():
            self._finish(GamePhase.PLAYER_WON)
        elif not result.is_hit:
            self._begin_ai_turn()
        self._autosave()
        return result

    def advance(self, delta_seconds: float) -> int:
        """Advance the scheduler clock; returns the number of steps run."""
        return self._scheduler.advance(delta_seconds)

    def drain_ai_turn(self) -> tuple[AiShot, ...]:
        """Run the pending AI turn to completion, ignoring think delays."""
        while self._phase is GamePhase.AI_TURN:
            due = self._scheduler.next_due_seconds()
            if due is None:
                self._schedule_ai_step(0.0)
                continue
            self._scheduler.run_due(max(due, self._scheduler.now_seconds))
        return self.last_ai_turn

    def render_info(self, coord: Coord, *, player_side: bool = True) -> ShipRenderInfo | None:
        board = self._player_board if player_side else self._machine_board
        return board.render_info(coord)

    def snapshot(self) -> GameSnapshot:
        """Return copies of both boards and the turn flag for persistence."""
        return GameSnapshot(
            player_board=self._player_board.copy(),
            machine_board=self._machine_board.copy(),
            is_player_turn=self._phase is not GamePhase.AI_TURN,
        )

    def restore(self, snapshot: GameSnapshot) -> None:
        """Resume from a snapshot. Play always resumes on the player's turn.

        The boards are copied. Raises ValueError when either board has no fleet,
        since such a snapshot was not taken during a battle.
        """
        if not snapshot.player_board.ships or not snapshot.machine_board.ships:
            raise ValueError("Snapshot has a board without ships.")
        self._cancel_ai_turn()
        self._player_board = snapshot.player_board.copy()
        self._machine_board = snapshot.machine_board.copy()
        self._ships_to_place.clear()
        self._strategy.on_reset()
        self._stats.enemy_ships_destroyed = self._machine_board.sunk_ship_count()
        self._stats.player_ships_destroyed = self._player_board.sunk_ship_count()
        if self._machine_board.is_fleet_destroyed():
            self._phase = GamePhase.PLAYER_WON
        elif self._player_board.is_fleet_destroyed():
            self._phase = GamePhase.PLAYER_LOST
        else:
            self._phase = GamePhase.PLAYER_TURN
        logger.info("game_restored phase=%s", self._phase.name)
        self._observers.board_changed(True)
        self._observers.board_changed(False)

    def save_game(self) -> bool:
        """Persist the game; nothing is written before the battle has started."""
        if self._save_service is None or self._phase is GamePhase.PLACEMENT:
            return False
        saved = self._save_service.save_game(self.snapshot())
        self._save_service.save_score(self._stats.nickname, self._machine_board.sunk_ship_count())
        return saved

    def load_game(self) -> bool:
        """Restore the saved game; False (and nothing changed) when none is usable."""
        if self._save_service is None:
            return False
        snapshot = self._save_service.load_game()
        if snapshot is None:
            return False
        try:
            self.restore(snapshot)
        except ValueError as exc:
            logger.warning("load_game_rejected error=%s", exc)
            return False
        return True

    def _begin_battle(self) -> None:
        self._machine_board = random_board(self._rng)
        self._phase = GamePhase.PLAYER_TURN
        logger.info("battle_started difficulty=%s", self._stats.difficulty.value)
        self._observers.board_changed(False)
        self._observers.turn_changed(True)
        self._autosave()

    def _begin_ai_turn(self) -> None:
        self._phase = GamePhase.AI_TURN
        self._ai_turn_shots = []
        self._observers.turn_changed(False)
        self._schedule_ai_step(self._config.ai_think_delay_seconds)

    def _schedule_ai_step(self, delay_seconds: float) -> None:
        self._ai_task = self._scheduler.call_later(delay_seconds, self._run_ai_step)

    def _run_ai_step(self) -> None:
        self._ai_task = None
        if self._phase is not GamePhase.AI_TURN:
            return
        shot = ai_step(self._player_board, self._strategy)
        self._ai_turn_shots.append(shot)
        if shot.result is ShotResult.SUNK:
            self._stats.player_ships_destroyed = self._player_board.sunk_ship_count()
        logger.info("ai_shot target=%s result=%s", shot.coord, shot.result.value)
        self._observers.shot_fired(shot.result.is_hit, shot.result is ShotResult.SUNK)
        self._observers.board_changed(True)

        if self._player_board.is_fleet_destroyed():
            self._finish(GamePhase.PLAYER_LOST)
        elif shot.ends_turn:
            self._phase = GamePhase.PLAYER_TURN
            self._observers.turn_changed(True)
        else:
            self._schedule_ai_step(self._config.ai_followup_delay_seconds)
        self._autosave()
        if self._on_ai_step is not None:
            self._on_ai_step(shot)

    def _finish(self, phase: GamePhase) -> None:
        self._cancel_ai_turn()
        self._phase = phase
        self._observers.game_over(phase is GamePhase.PLAYER_WON)

    def _cancel_ai_turn(self) -> None:
        if self._ai_task is not None:
            self._scheduler.cancel(self._ai_task)
            self._ai_task = None

    def _autosave(self) -> None:
        if self._config.autosave:
            self.save_game()
