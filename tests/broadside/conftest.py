from __future__ import annotations

import random

import pytest

from broadside.game.app.controller import GameController
from broadside.game.core.models import Coord
from broadside.game.infra.config import GameConfig
from broadside.game.persistence.repository import SaveRepository
from broadside.game.persistence.service import SaveService

# Non-overlapping player layout for DEFAULT_FLEET, one ship per row.
FLEET_LAYOUT: tuple[tuple[Coord, int], ...] = (
    (Coord(0, 0), 4),
    (Coord(2, 0), 3),
    (Coord(4, 0), 3),
    (Coord(6, 0), 2),
    (Coord(8, 0), 2),
    (Coord(0, 6), 2),
    (Coord(2, 9), 1),
    (Coord(4, 9), 1),
    (Coord(6, 9), 1),
    (Coord(8, 9), 1),
)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def save_service(tmp_path) -> SaveService:
    return SaveService(SaveRepository(tmp_path / "saves"))


@pytest.fixture
def controller_factory():
    def _make(seed: int = 1337, **kwargs) -> GameController:
        kwargs.setdefault("config", GameConfig())
        return GameController(random.Random(seed), **kwargs)

    return _make


@pytest.fixture
def battle_controller(controller_factory) -> GameController:
    controller = controller_factory()
    for start, length in FLEET_LAYOUT:
        controller.place_ship(start, length, True)
    return controller
