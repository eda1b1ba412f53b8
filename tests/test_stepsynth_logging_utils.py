from __future__ import annotations

import logging
from pathlib import Path

import pytest

from stepsynth.logging_utils import configure_logging, get_log_dir, get_log_path, log_exception


def test_log_dir_uses_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEPSYNTH_LOG_DIR", str(tmp_path))
    assert get_log_dir() == tmp_path
    assert get_log_path() == tmp_path / "stepsynth.log"


def test_log_exception_appends_traceback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEPSYNTH_LOG_DIR", str(tmp_path / "nested"))
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        path = log_exception("render", exc)
    assert path == tmp_path / "nested" / "stepsynth.log"
    text = path.read_text(encoding="utf-8")
    assert "render failed: RuntimeError: boom" in text
    assert "Traceback" in text


def test_configure_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEPSYNTH_LOG_LEVEL", "debug")
    logger = configure_logging()
    configure_logging()
    assert logger.level == logging.DEBUG
    named = [handler for handler in logger.handlers if handler.get_name() == "stepsynth-console"]
    assert len(named) == 1
    configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING
