"""
Тесты для конфигурации логирования
"""

import logging

import pytest

from src.utils.logging_config import LOG_FORMAT, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    """Тесты setup_logging"""

    def test_sets_level_and_console_handler(self) -> None:
        setup_logging(level=logging.DEBUG)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.handlers[0].formatter._fmt == LOG_FORMAT

    def test_repeated_setup_does_not_duplicate(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_console_handler_only(self, capsys) -> None:
        """Логи идут только в stderr, файловых обработчиков нет"""
        setup_logging(level=logging.INFO)
        get_logger("tests.sums").info("hello from test")

        handlers = logging.getLogger().handlers
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)
        assert "hello from test" in capsys.readouterr().err


class TestGetLogger:
    """Тесты get_logger"""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("src.core.math.summation")
        assert logger.name == "src.core.math.summation"

    def test_level_inherited_from_root(self) -> None:
        logger = get_logger("tests.inherit")
        assert logger.level == logging.NOTSET
