"""App-level logging policy over the engine logging pipeline."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from broadside.engine.logging import JsonFormatter, LoggingConfig, configure_logging
from broadside.game.infra.app_data import resolve_logs_dir

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> LoggingConfig:
    """Build logging configuration from env vars."""
    level_name = os.getenv("BROADSIDE_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "json").lower()
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(Path(base_dir) / f"broadside_run_{stamp}.jsonl")
