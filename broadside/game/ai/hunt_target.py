"""Hard AI: hunt on a checkerboard, then target around known hits."""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Sequence

from broadside.game.ai.strategy import ShootingStrategy
from broadside.game.core.board import Board
from broadside.game.core.models import CellState, Coord

logger = logging.getLogger(__name__)


class HuntTargetStrategy(ShootingStrategy):
    """Hunt/target AI with parity optimization.

    Hits feed a FIFO target queue with their N/S/W/E neighbours. While the queue
    has eligible cells they are fired in insertion order. Once it runs dry, any
    remembered hit that is still not sunk re-seeds the queue. With nothing left
    to chase the strategy hunts on cells where ``(row + col)`` is even, since
    every ship of length two or more covers at least one of them.
    """

    def __init__(self, rng: random.Random) -> None:
        super().__init__(rng)
        self._target_queue: deque[Coord] = deque()
        self._hit_history: list[Coord] = []
        self._fired: set[Coord] = set()
        self._sunk_neighbors: set[Coord] = set()

    @property
    def target_queue(self) -> tuple[Coord, ...]:
        return tuple(self._target_queue)

    @property
    def hit_history(self) -> tuple[Coord, ...]:
        return tuple(self._hit_history)

    def next_shot(self, board: Board) -> Coord:
        shot = self._next_target(board)
        if shot is None:
            self._requeue_live_hits(board)
            shot = self._next_target(board)
        if shot is None:
            shot = self._hunt(board)
        self._fired.add(shot)
        return shot

    def on_hit(self, coord: Coord) -> None:
        self._fired.add(coord)
        if coord in self._target_queue:
            self._target_queue.remove(coord)
        self._hit_history.append(coord)
        for cell in coord.neighbors():
            if cell in self._fired or cell in self._target_queue:
                continue
            self._target_queue.append(cell)
        logger.debug("ai_target_queue_grown hit=%s queued=%d", coord, len(self._target_queue))

    def on_sunk(self, cells: Sequence[Coord]) -> None:
        sunk = set(cells)
        self._hit_history = [hit for hit in self._hit_history if hit not in sunk]
        neighbors = {cell for coord in cells for cell in coord.neighbors()} - sunk
        self._target_queue = deque(cell for cell in self._target_queue if cell not in neighbors)
        self._sunk_neighbors.update(neighbors)
        logger.debug(
            "ai_ship_sunk cells=%d pending_hits=%d queued=%d",
            len(sunk),
            len(self._hit_history),
            len(self._target_queue),
        )

    def on_reset(self) -> None:
        self._target_queue.clear()
        self._hit_history.clear()
        self._fired.clear()
        self._sunk_neighbors.clear()

    def _next_target(self, board: Board) -> Coord | None:
        while self._target_queue:
            coord = self._target_queue.popleft()
            if board.is_eligible(coord):
                return coord
        return None

    def _requeue_live_hits(self, board: Board) -> None:
        for hit in self._hit_history:
            if board.state_at(hit) is not CellState.HIT:
                continue
            for cell in hit.neighbors():
                if board.is_eligible(cell) and cell not in self._target_queue:
                    self._target_queue.append(cell)

    def _hunt(self, board: Board) -> Coord:
        eligible = [cell for cell in board.eligible_cells() if cell not in self._sunk_neighbors]
        parity = [cell for cell in eligible if (cell.row + cell.col) % 2 == 0]
        if parity:
            return self._rng.choice(parity)
        if eligible:
            return self._rng.choice(eligible)
        return self.random_shot(board)
