"""
Утилиты для HTML представления эмодзи
Теги <img> и <span> для записей эмодзи
"""

from typing import Optional

# Локальные импорты
from emoji_toolkit.models.emoji import EmojiRecord

DEFAULT_CLASS = "emoji"
DEFAULT_PATH = "/emoji/"
DEFAULT_EXT = ".png"


def image_tag(
    emoji: EmojiRecord,
    css: Optional[str] = None,
    path: Optional[str] = None,
    ext: Optional[str] = None
) -> str:
    """
    Тег <img> для эмодзи

    Имя файла - базовый codepoint id, например /emoji/1f40c.png
    """
    css = DEFAULT_CLASS if css is None else css
    path = DEFAULT_PATH if path is None else path
    ext = DEFAULT_EXT if ext is None else ext
    return (
        f"<img class=\"{css}\" alt=\"{emoji.raw}\" title=\"{emoji.shortcode}\" "
        f"src=\"{path}{emoji.base_codepoint}{ext}\" />"
    )


def span_tag(emoji: EmojiRecord, css: Optional[str] = None) -> str:
    """Тег <span> для эмодзи"""
    css = DEFAULT_CLASS if css is None else css
    return f"<span class=\"{css}\" title=\"{emoji.shortcode}\">{emoji.raw}</span>"
