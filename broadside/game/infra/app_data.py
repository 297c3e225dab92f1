"""Unified app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("BROADSIDE_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate
    return Path.cwd() / "appdata"


def resolve_logs_dir() -> Path:
    """Resolve logs directory under app-data root."""
    configured = os.getenv("BROADSIDE_LOG_DIR", "").strip()
    if configured:
        return Path(configured)
    return resolve_app_data_root() / "logs"


def resolve_saves_dir() -> Path:
    """Resolve saves directory under app-data root."""
    return resolve_app_data_root() / "saves"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    paths = {
        "root": resolve_app_data_root(),
        "logs": resolve_logs_dir(),
        "saves": resolve_saves_dir(),
    }
    for path in paths.values():
        path.mkdir(parents=True, exist_ok=True)
    return paths
