"""Fleet composition and random placement."""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterable

from broadside.game.core.board import Board
from broadside.game.core.models import BOARD_SIZE, DEFAULT_FLEET, Coord, ShipType
from broadside.game.core.ship import Ship

logger = logging.getLogger(__name__)

_MAX_ATTEMPTS_PER_SHIP = 10_000


def build_fleet(ship_types: Iterable[ShipType] = DEFAULT_FLEET) -> deque[Ship]:
    """Return a placement queue of fresh ships in fleet order."""
    return deque(Ship.of(ship_type) for ship_type in ship_types)


def place_randomly(board: Board, ship: Ship, rng: random.Random) -> int:
    """Place one ship at a random start and orientation, retrying until it fits.

    Returns the number of attempts used.
    """
    for attempt in range(1, _MAX_ATTEMPTS_PER_SHIP + 1):
        horizontal = rng.choice((True, False))
        start = Coord(rng.randrange(BOARD_SIZE), rng.randrange(BOARD_SIZE))
        if board.can_place(ship.length, start, horizontal):
            board.place_ship(ship, start, horizontal)
            return attempt
    raise RuntimeError(f"Failed to place {ship.ship_type.value} randomly.")


def place_fleet_randomly(
    board: Board, rng: random.Random, ships: Iterable[Ship] | None = None
) -> Board:
    """Place every ship (the default fleet when omitted) on ``board``."""
    to_place = list(ships) if ships is not None else list(build_fleet())
    attempts = 0
    for ship in to_place:
        attempts += place_randomly(board, ship, rng)
    logger.debug("fleet_placed ships=%d attempts=%d", len(to_place), attempts)
    return board


def random_board(rng: random.Random) -> Board:
    """Create a board holding a randomly placed default fleet."""
    return place_fleet_randomly(Board(), rng)
