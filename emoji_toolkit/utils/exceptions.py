"""
Модуль кастомных исключений emoji-toolkit
Содержит специализированные исключения для разных модулей
"""

from typing import Optional, Any

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="exceptions")


class EmojiToolkitError(Exception):
    """Базовое исключение для всех ошибок библиотеки"""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

        # Логируем все исключения
        if details:
            logger.error("EmojiToolkitError: {} | Детали: {}", message, details)
        else:
            logger.error("EmojiToolkitError: {}", message)


# ==============================================
# ИСКЛЮЧЕНИЯ КОНФИГУРАЦИИ
# ==============================================

class ConfigurationError(EmojiToolkitError):
    """Ошибки конфигурации библиотеки"""
    pass


class InvalidConfigValueError(ConfigurationError):
    """Неверное значение в конфигурации"""

    def __init__(self, parameter: str, value: Any, expected: str):
        message = f"Неверное значение параметра '{parameter}': {value}. Ожидается: {expected}"
        super().__init__(message)
        self.parameter = parameter
        self.value = value
        self.expected = expected


# ==============================================
# ИСКЛЮЧЕНИЯ АРГУМЕНТОВ И КОДИРОВАНИЯ
# ==============================================

class InvalidArgumentError(EmojiToolkitError):
    """Обязательный аргумент не передан"""

    def __init__(self, argument: str):
        message = f"Аргумент '{argument}' не может быть None"
        super().__init__(message)
        self.argument = argument


class EncodingError(EmojiToolkitError):
    """Ошибка преобразования codepoint id в строку"""

    def __init__(self, codepoint_id: str, details: Optional[str] = None):
        message = f"Неподдерживаемый codepoint: {codepoint_id!r}"
        super().__init__(message, details)
        self.codepoint_id = codepoint_id


# ==============================================
# ИСКЛЮЧЕНИЯ ДАННЫХ ЭМОДЗИ
# ==============================================

class EmojiDataError(EmojiToolkitError):
    """Ошибка загрузки или валидации данных эмодзи"""

    def __init__(self, source: str, details: Optional[str] = None):
        message = f"Ошибка данных эмодзи: {source}"
        super().__init__(message, details)
        self.source = source


class DuplicateEmojiKeyError(EmojiDataError):
    """Попытка добавить дублирующийся ключ в индекс"""

    def __init__(self, index: str, key: str):
        super().__init__(index, f"ключ {key!r} уже существует в индексе {index}")
        self.index = index
        self.key = key
