"""
Модуль конфигурации библиотеки
Загружает и валидирует переменные окружения с префиксом EMOJI_
"""

import threading
from pathlib import Path
from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Локальные импорты
from emoji_toolkit.utils.exceptions import InvalidConfigValueError

# Настройка логгера модуля
logger = logger.bind(module="config")

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    """Конфигурация библиотеки с валидацией"""

    model_config = SettingsConfigDict(
        env_prefix="EMOJI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTML разметка
    CSS_CLASS: str = "emoji"
    IMAGE_PATH: str = "/emoji/"
    IMAGE_EXT: str = ".png"

    # Данные (None - встроенный emoji.json)
    DATA_PATH: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "30 days"

    @field_validator("CSS_CLASS")
    @classmethod
    def validate_css_class(cls, v: str) -> str:
        """Валидация CSS класса"""
        if not v.strip():
            raise ValueError("CSS_CLASS не может быть пустым")
        return v

    @field_validator("IMAGE_EXT")
    @classmethod
    def validate_image_ext(cls, v: str) -> str:
        """Валидация расширения изображений"""
        if not v.startswith("."):
            raise ValueError("IMAGE_EXT должен начинаться с точки, например .png")
        return v

    @field_validator("DATA_PATH")
    @classmethod
    def validate_data_path(cls, v: Optional[str]) -> Optional[str]:
        """Валидация пути к данным эмодзи"""
        if v is not None and not Path(v).is_file():
            raise ValueError(f"Файл данных эмодзи не найден: {v}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидация уровня логирования"""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL должен быть одним из: {', '.join(VALID_LOG_LEVELS)}")
        return v.upper()

    def get_data_path(self) -> Optional[Path]:
        """Получить путь к альтернативному файлу данных"""
        return Path(self.DATA_PATH) if self.DATA_PATH else None


def _load_config() -> Config:
    """Создать Config, ошибки валидации pydantic -> InvalidConfigValueError"""
    try:
        return Config()
    except ValidationError as e:
        error = e.errors()[0]
        parameter = ".".join(str(part) for part in error["loc"]) or "Config"
        raise InvalidConfigValueError(parameter, error.get("input"), error["msg"]) from e


# Глобальный экземпляр конфигурации
_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Получить глобальный экземпляр конфигурации"""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = _load_config()
                logger.debug("Конфигурация загружена: css={}, path={}, ext={}",
                             _config.CSS_CLASS, _config.IMAGE_PATH, _config.IMAGE_EXT)
    return _config


def reload_config() -> Config:
    """Перезагрузить конфигурацию"""
    global _config
    with _config_lock:
        _config = None
    return get_config()
