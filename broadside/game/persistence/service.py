"""Save/load use cases with schema validation."""

from __future__ import annotations

import json
import logging

from broadside.game.core.snapshot import GameSnapshot
from broadside.game.persistence.repository import SaveRepository
from broadside.game.persistence.schema import payload_to_snapshot, snapshot_to_payload

logger = logging.getLogger(__name__)


class SaveService:
    """High-level save operations.

    Saving is best effort and loading never raises: a missing or damaged save
    means the caller starts a fresh game.
    """

    def __init__(self, repository: SaveRepository) -> None:
        self._repository = repository

    def has_saved_game(self) -> bool:
        return self._repository.has_game()

    def save_game(self, snapshot: GameSnapshot) -> bool:
        """Persist the snapshot. Returns whether it was written."""
        try:
            self._repository.save_payload(snapshot_to_payload(snapshot))
        except OSError as exc:
            logger.warning("save_game_failed error=%s", exc)
            return False
        logger.debug("game_saved path=%s", self._repository.game_path)
        return True

    def load_game(self) -> GameSnapshot | None:
        """Load the saved snapshot, or None when there is nothing usable."""
        try:
            snapshot = payload_to_snapshot(self._repository.load_payload())
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError, ValueError) as exc:
            logger.warning("load_game_failed error=%s", exc)
            return None
        logger.info("game_loaded path=%s", self._repository.game_path)
        return snapshot

    def discard_game(self) -> None:
        try:
            self._repository.delete_game()
        except OSError as exc:
            logger.warning("discard_game_failed error=%s", exc)

    def save_score(self, nickname: str, sunk_ships: int) -> bool:
        try:
            self._repository.save_score(nickname, sunk_ships)
        except OSError as exc:
            logger.warning("save_score_failed error=%s", exc)
            return False
        return True

    def last_score(self) -> dict[str, str] | None:
        """Return the score sheet fields, or None when no sheet is readable."""
        try:
            return self._repository.load_score()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("load_score_failed error=%s", exc)
            return None
