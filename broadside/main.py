"""Application entry point: headless demo round."""

from __future__ import annotations

import logging
import random

from broadside.engine.logging import shutdown_logging
from broadside.game.app.controller import GameController
from broadside.game.infra.app_data import ensure_app_data_dirs
from broadside.game.infra.config import load_default_env_files, load_game_config
from broadside.game.infra.logging import setup_logging
from broadside.game.persistence.repository import SaveRepository
from broadside.game.persistence.service import SaveService

logger = logging.getLogger(__name__)

_MAX_PLAYER_SHOTS = 200


def play_demo_round(
    controller: GameController, rng: random.Random, *, resume: bool = False
) -> bool:
    """Play one game with random player shots. Returns whether the player won.

    With ``resume`` the controller's current battle is continued instead of
    starting over.
    """
    if not resume:
        controller.start_new_game()
        controller.place_player_fleet_randomly()
    for _ in range(_MAX_PLAYER_SHOTS):
        if controller.is_game_over:
            break
        target = rng.choice(controller.machine_board.eligible_cells())
        controller.shoot(target)
        controller.drain_ai_turn()
    return controller.machine_board.is_fleet_destroyed()


def main() -> None:
    """Run a headless Broadside round and log the outcome."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    config = load_game_config()
    logger.info("app_data_paths root=%s logs=%s saves=%s", paths["root"], paths["logs"], paths["saves"])

    rng = random.Random(config.seed)
    save_service = SaveService(SaveRepository(paths["saves"]))
    controller = GameController(rng, config=config, save_service=save_service)
    try:
        resumed = controller.load_game()
        player_won = play_demo_round(controller, rng, resume=resumed)
        save_service.discard_game()
        logger.info(
            "demo_finished player_won=%s resumed=%s",
            player_won,
            resumed,
            extra={
                "summary": controller.stats.summary(),
                "score": save_service.last_score(),
            },
        )
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
