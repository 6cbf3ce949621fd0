"""
emoji-toolkit
Преобразование эмодзи между unicode, шорткодами, ascii эмотиконами и HTML
"""

import sys
from typing import Optional, List, Sequence

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emoji_toolkit.emoji import (
    to_codepoint_id,
    from_codepoint_id,
    to_surrogate_literal,
    get_emoji_dictionary,
    get_emoji_processor,
    get_emoji_classifier
)
from emoji_toolkit.models.emoji import EmojiRecord
from emoji_toolkit.utils.exceptions import (
    EmojiToolkitError,
    InvalidArgumentError,
    EncodingError,
    EmojiDataError,
    DuplicateEmojiKeyError
)

# Логи библиотеки выключены, пока не вызван setup_logging
logger.disable("emoji_toolkit")

__version__ = "1.0.0"


def get(value: str) -> Optional[EmojiRecord]:
    """Эмодзи по шорткоду, ascii эмотикону или raw строке"""
    return get_emoji_dictionary().get(value)


def get_ascii(value: str) -> Optional[str]:
    """Ascii эквивалент эмодзи, например :wink: -> ;)"""
    return get_emoji_dictionary().get_ascii(value)


def get_raw(shortcode: str) -> Optional[str]:
    """Raw unicode строка по шорткоду"""
    return get_emoji_dictionary().get_raw(shortcode)


def get_shortcode(raw: str) -> Optional[str]:
    """Шорткод по raw unicode строке"""
    return get_emoji_dictionary().get_shortcode(raw)


def get_image(
    value: str,
    css: Optional[str] = None,
    path: Optional[str] = None,
    ext: Optional[str] = None
) -> Optional[str]:
    """Тег <img> для эмодзи"""
    return get_emoji_dictionary().get_image(value, css, path, ext)


def get_span(value: str, css: Optional[str] = None) -> Optional[str]:
    """Тег <span> для эмодзи"""
    return get_emoji_dictionary().get_span(value, css)


def find(query: str) -> List[EmojiRecord]:
    """Эмодзи с подстрокой query в названии, категории, шорткодах или тегах"""
    return get_emoji_dictionary().find(query)


def all_emoji() -> Sequence[EmojiRecord]:
    """Все эмодзи в порядке таблицы"""
    return get_emoji_dictionary().all


def is_emoji(text: str, max_symbol_count: int = sys.maxsize) -> bool:
    """Состоит ли текст только из эмодзи (не более max_symbol_count символов)"""
    return get_emoji_classifier().is_emoji(text, max_symbol_count)


def asciify(text: Optional[str]) -> Optional[str]:
    """Шорткоды и raw эмодзи -> ascii эмотиконы"""
    return get_emoji_processor().asciify(text)


def emojify(text: Optional[str], ascii: bool = False) -> Optional[str]:
    """Шорткоды (и ascii эмотиконы при ascii=True) -> raw эмодзи"""
    return get_emoji_processor().emojify(text, ascii)


def demojify(text: Optional[str]) -> Optional[str]:
    """Raw эмодзи -> шорткоды"""
    return get_emoji_processor().demojify(text)


def imagify(
    text: Optional[str],
    ascii: bool = False,
    css: Optional[str] = None,
    path: Optional[str] = None,
    ext: Optional[str] = None
) -> Optional[str]:
    """Шорткоды и raw эмодзи -> теги <img>"""
    return get_emoji_processor().imagify(text, ascii, css, path, ext)


def spanify(text: Optional[str], ascii: bool = False, css: Optional[str] = None) -> Optional[str]:
    """Шорткоды и raw эмодзи -> теги <span>"""
    return get_emoji_processor().spanify(text, ascii, css)


def find_emojis(text: str) -> List[str]:
    """Все raw эмодзи в тексте"""
    return get_emoji_processor().find_emojis(text)


__all__ = [
    "EmojiRecord",
    "EmojiToolkitError",
    "InvalidArgumentError",
    "EncodingError",
    "EmojiDataError",
    "DuplicateEmojiKeyError",
    "get",
    "get_ascii",
    "get_raw",
    "get_shortcode",
    "get_image",
    "get_span",
    "find",
    "all_emoji",
    "is_emoji",
    "asciify",
    "emojify",
    "demojify",
    "imagify",
    "spanify",
    "find_emojis",
    "to_codepoint_id",
    "from_codepoint_id",
    "to_surrogate_literal"
]
