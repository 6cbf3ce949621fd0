"""
Модуль настройки логирования через loguru
По умолчанию логи библиотеки отключены, setup_logging включает их
"""

import sys
from pathlib import Path
from typing import Optional, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

PACKAGE_NAME = "emoji_toolkit"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "{extra[module]} | "
    "{message}"
)


def _has_module(record) -> bool:
    return record["extra"].get("module") is not None


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_rotation: str = "10 MB",
    log_retention: str = "30 days"
) -> None:
    """
    Настройка логирования через loguru

    Args:
        log_level: Уровень логирования
        log_file: Файл для логов (None - только консоль)
        log_rotation: Размер файла для ротации
        log_retention: Время хранения логов
    """
    # Удаляем стандартный handler
    logger.remove()

    # Console handler с цветной подсветкой
    logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        filter=_has_module
    )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            level="DEBUG",
            format=FILE_FORMAT,
            rotation=log_rotation,
            retention=log_retention,
            encoding="utf-8",
            enqueue=True,
            filter=_has_module
        )

    logger.enable(PACKAGE_NAME)

    logger.bind(module="logging_config").debug("Уровень логирования: {}", log_level)


def setup_logging_from_config(log_file: Optional[Union[str, Path]] = None) -> None:
    """Настройка логирования из конфигурации"""
    # Импортируем здесь чтобы избежать циклических импортов
    from emoji_toolkit.utils.config import get_config

    config = get_config()
    setup_logging(
        log_level=config.LOG_LEVEL,
        log_file=log_file,
        log_rotation=config.LOG_ROTATION,
        log_retention=config.LOG_RETENTION
    )


def disable_logging() -> None:
    """Отключить логи библиотеки"""
    logger.disable(PACKAGE_NAME)


def get_module_logger(module_name: str):
    """
    Получить логгер для конкретного модуля

    Args:
        module_name: Имя модуля

    Returns:
        Логгер с привязкой к модулю
    """
    return logger.bind(module=module_name)
