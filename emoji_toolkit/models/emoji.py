"""
Модель записи эмодзи
Одна неизменяемая запись на каждый эмодзи из таблицы
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Sequence

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emoji_toolkit.emoji.codec import to_codepoint_id

# Настройка логгера модуля
logger = logger.bind(module="models_emoji")


@dataclass(frozen=True)
class EmojiRecord:
    """
    Запись эмодзи

    Attributes:
        raw: Строка Unicode для fully-qualified последовательности
        name: Название (например: grinning face)
        category: Категория (people, nature, symbols, ...)
        codepoints: (base,) или (base, fully_qualified) если они различаются
        shortcodes: Шорткоды, первый - основной, остальные - алиасы
        ascii: ASCII эмотиконы (None для большинства записей)
        tags: Ключевые слова для поиска (None если нет)
        version: Версия Unicode Emoji, в которой появился символ
    """

    raw: str
    name: str
    category: str
    codepoints: Tuple[str, ...]
    shortcodes: Tuple[str, ...]
    ascii: Optional[Tuple[str, ...]] = None
    tags: Optional[Tuple[str, ...]] = None
    version: str = ""

    def validate(self) -> bool:
        """Валидация записи эмодзи"""

        if not self.codepoints:
            logger.error("codepoints не может быть пустым: {}", self.name)
            return False

        if not self.shortcodes:
            logger.error("shortcodes не может быть пустым: {}", self.name)
            return False

        # raw должен соответствовать последнему codepoint
        if to_codepoint_id(self.raw) != self.codepoints[-1]:
            logger.error("raw {!r} не соответствует codepoint {}", self.raw, self.codepoints[-1])
            return False

        for shortcode in self.shortcodes:
            if not (len(shortcode) > 2 and shortcode.startswith(":") and shortcode.endswith(":")):
                logger.error("Неверный шорткод {!r} у {}", shortcode, self.name)
                return False

        return True

    @property
    def shortcode(self) -> str:
        """Основной шорткод"""
        return self.shortcodes[0]

    @property
    def base_codepoint(self) -> str:
        """Базовый codepoint id (используется в имени файла изображения)"""
        return self.codepoints[0]

    @property
    def fully_qualified_codepoint(self) -> str:
        return self.codepoints[-1]

    def __repr__(self) -> str:
        return (
            f"EmojiRecord(raw='{self.raw}', shortcode='{self.shortcode}', "
            f"codepoints={list(self.codepoints)}, category='{self.category}')"
        )


def create_emoji_record(
    raw: str,
    name: str,
    category: str,
    codepoints: Sequence[str],
    shortcodes: Sequence[str],
    ascii: Optional[Sequence[str]] = None,
    tags: Optional[Sequence[str]] = None,
    version: str = ""
) -> EmojiRecord:
    """
    Фабричная функция для создания записи эмодзи

    Пустые ascii/tags приводятся к None, последовательности к кортежам.

    Returns:
        Созданный объект EmojiRecord
    """
    emoji = EmojiRecord(
        raw=raw,
        name=name,
        category=category,
        codepoints=tuple(codepoints),
        shortcodes=tuple(shortcodes),
        ascii=tuple(ascii) if ascii else None,
        tags=tuple(tags) if tags else None,
        version=str(version)
    )

    if not emoji.validate():
        logger.error("Невалидная запись эмодзи: {}", name)

    return emoji
