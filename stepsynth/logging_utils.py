from __future__ import annotations

import logging
import os
import traceback
from datetime import datetime
from pathlib import Path

_LOGGER = logging.getLogger("stepsynth.logging")
_LOG_DIR_ENV = "STEPSYNTH_LOG_DIR"
_LOG_LEVEL_ENV = "STEPSYNTH_LOG_LEVEL"
_LOG_FILE = "stepsynth.log"
_HANDLER_NAME = "stepsynth-console"


def get_log_dir() -> Path:
    configured = os.environ.get(_LOG_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".cache" / "stepsynth" / "logs"


def get_log_path() -> Path:
    return get_log_dir() / _LOG_FILE


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.environ.get(_LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""

    logger = logging.getLogger("stepsynth")
    logger.setLevel(_resolve_level(level))
    if any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger


def log_exception(context: str, exc: BaseException) -> Path | None:
    try:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        path = get_log_path()
        timestamp = datetime.now().isoformat()
        with path.open("a", encoding="utf-8") as handle:
            handle.write(f"[{timestamp}] {context} failed: {type(exc).__name__}: {exc}\n")
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=handle)
            handle.write("\n")
        return path
    except OSError as log_exc:
        _LOGGER.warning("Failed to write log file: %s", log_exc, exc_info=True)
        return None
