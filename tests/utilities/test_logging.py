import logging
from logging.handlers import RotatingFileHandler

import pytest

from tickring.utilities.logging import get_logger


def test_logger_writes_rolling_file_in_configured_directory(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TICKRING_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logger = get_logger("tickring.tests.rolling")
    logger.debug("hello %s", "clock")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "tickring_tests_rolling.log"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers)
    assert "hello clock" in log_file.read_text()


def test_existing_handlers_are_kept(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKRING_LOG_DIR", str(tmp_path))
    first = get_logger("tickring.tests.reused")
    handlers = list(first.handlers)

    second = get_logger("tickring.tests.reused")

    assert second is first
    assert second.handlers == handlers
