"""
Настройка логирования пакета.

Модули библиотеки пишут в logging.getLogger(__name__) и не настраивают
обработчики сами. configure_logging подключает RichHandler к логгеру "src".
"""

import logging
from typing import Final

from rich.logging import RichHandler

PACKAGE_LOGGER_NAME: Final[str] = "src"


def configure_logging(log_level: int = logging.INFO) -> logging.Logger:
    """
    Подключение RichHandler к логгеру пакета.

    Повторный вызов меняет только уровень: обработчик добавляется один раз.

    Args:
        log_level: Уровень логирования

    Returns:
        Логгер пакета
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
