import logging

import pytest

from sqlavro.observability import logger as logger_module


@pytest.fixture
def fresh_logger():
    log = logging.getLogger("sqlavro")
    saved_handlers, saved_level = list(log.handlers), log.level
    log.handlers = []
    yield log
    log.handlers = saved_handlers
    log.setLevel(saved_level)


@pytest.mark.parametrize("value,expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("not-a-level", logging.INFO),
    ("", logging.INFO),
])
def test_log_level_from_environment(monkeypatch, fresh_logger, value, expected):
    monkeypatch.setenv("SQLAVRO_LOG_LEVEL", value)

    assert logger_module.get_logger().level == expected
