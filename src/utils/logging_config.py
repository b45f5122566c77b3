"""
Logging configuration.

Библиотечный код только получает логгеры через get_logger и пишет DEBUG
сообщения; обработчики настраивает точка входа через setup_logging.
"""

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO) -> None:
    """
    Настройка root логгера: один console handler (stderr).

    Повторный вызов заменяет ранее установленные обработчики.

    Args:
        level: Уровень логирования (logging.INFO, logging.DEBUG, ...)
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Очистка обработчиков, чтобы не дублировать вывод
    if root.hasHandlers():
        root.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Логгер модуля.

    Уровень не устанавливается: он наследуется от root логгера,
    настроенного в setup_logging.
    """
    return logging.getLogger(name)
