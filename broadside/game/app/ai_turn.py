"""Single AI shot step, independent of how the turn is scheduled."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from broadside.game.ai.strategy import ShootingStrategy
from broadside.game.core.board import Board
from broadside.game.core.models import Coord, ShotResult

logger = logging.getLogger(__name__)

_MAX_PICK_ATTEMPTS = 200


@dataclass(frozen=True, slots=True)
class AiShot:
    """Outcome of one AI shot against the player board."""

    coord: Coord
    result: ShotResult
    sunk_cells: tuple[Coord, ...] = ()

    @property
    def ends_turn(self) -> bool:
        return not self.result.is_hit


def ai_step(board: Board, strategy: ShootingStrategy) -> AiShot:
    """Let ``strategy`` pick a cell, fire it at ``board`` and feed the result back.

    Picks that land on an already targeted cell are retried; after too many the
    first eligible cell is used so a faulty strategy cannot stall the turn.
    """
    for _ in range(_MAX_PICK_ATTEMPTS):
        coord = strategy.next_shot(board)
        if board.is_eligible(coord):
            break
        logger.debug("ai_pick_rejected coord=%s", coord)
    else:
        eligible = board.eligible_cells()
        if not eligible:
            raise RuntimeError("No eligible cell left for the AI to fire at.")
        coord = eligible[0]
        logger.warning("ai_pick_fallback coord=%s", coord)

    result = board.resolve_shot(coord)
    sunk_cells: tuple[Coord, ...] = ()
    if result.is_hit:
        strategy.on_hit(coord)
    if result is ShotResult.SUNK:
        ship = board.ship_at(coord)
        sunk_cells = tuple(ship.cells) if ship is not None else (coord,)
        strategy.on_sunk(sunk_cells)
    return AiShot(coord=coord, result=result, sunk_cells=sunk_cells)
