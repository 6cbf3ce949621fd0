"""
Модели данных
"""

from .emoji import EmojiRecord, create_emoji_record

__all__ = [
    "EmojiRecord",
    "create_emoji_record"
]
