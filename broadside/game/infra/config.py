"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from broadside.game.ai.difficulty import Difficulty


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game settings sourced from environment."""

    difficulty: Difficulty = Difficulty.EASY
    nickname: str = "Admiral"
    seed: int | None = None
    ai_think_delay_seconds: float = 0.0
    ai_followup_delay_seconds: float = 0.0
    autosave: bool = False


def load_game_config() -> GameConfig:
    """Load game configuration from env vars."""
    return GameConfig(
        difficulty=Difficulty.parse(os.getenv("BROADSIDE_DIFFICULTY")),
        nickname=os.getenv("BROADSIDE_NICKNAME", "").strip() or "Admiral",
        seed=_optional_int("BROADSIDE_SEED"),
        ai_think_delay_seconds=max(0.0, _float("BROADSIDE_AI_THINK_DELAY", 0.0)),
        ai_followup_delay_seconds=max(0.0, _float("BROADSIDE_AI_FOLLOWUP_DELAY", 0.0)),
        autosave=_flag("BROADSIDE_AUTOSAVE", False),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win.

    Default order: ``appdata/config/.env``, ``appdata/config/.env.local``,
    ``.env``, ``.env.local``.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None
