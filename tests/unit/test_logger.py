import logging
from collections.abc import Iterator

import pytest

from passport_reader.logging.logger import Log


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    logger = logging.getLogger("passport_reader")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("passport_reader").level == logging.DEBUG

    def test_configure_adds_single_handler(self) -> None:
        logger = logging.getLogger("passport_reader")
        logger.handlers = []
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(logger.handlers) == 1

    def test_info_reaches_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="passport_reader"):
            Log.info("state -> ready (generation 1)")
        assert "state -> ready" in caplog.text
