"""File repository for the save game and the score sheet."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

GAME_FILE = "game.json"
SCORE_FILE = "score.txt"


class SaveRepository:
    """Stores one JSON save game and one plain-text score file under ``root``."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def game_path(self) -> Path:
        return self._root / GAME_FILE

    @property
    def score_path(self) -> Path:
        return self._root / SCORE_FILE

    def has_game(self) -> bool:
        return self.game_path.exists()

    def load_payload(self) -> dict[str, object]:
        """Load the saved game payload."""
        if not self.game_path.exists():
            raise FileNotFoundError(f"No saved game at {self.game_path}.")
        with self.game_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, dict):
            raise ValueError("Saved game must be a JSON object.")
        return payload

    def save_payload(self, payload: dict[str, object]) -> None:
        """Write the game payload, replacing any previous save."""
        self._root.mkdir(parents=True, exist_ok=True)
        tmp_path = self.game_path.with_suffix(".json.tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
        tmp_path.replace(self.game_path)

    def delete_game(self) -> None:
        if self.game_path.exists():
            self.game_path.unlink()

    def save_score(self, nickname: str, sunk_ships: int, when: datetime | None = None) -> None:
        """Write the score sheet as plain text lines."""
        self._root.mkdir(parents=True, exist_ok=True)
        stamp = (when or datetime.now()).isoformat(timespec="seconds")
        lines = [f"Nickname: {nickname}", f"Sunk ships: {sunk_ships}", f"Date: {stamp}"]
        self.score_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load_score(self) -> dict[str, str]:
        """Read the score sheet back as a field-name to value mapping."""
        result: dict[str, str] = {}
        for line in self.score_path.read_text(encoding="utf-8").splitlines():
            key, sep, value = line.partition(":")
            if sep:
                result[key.strip()] = value.strip()
        return result
