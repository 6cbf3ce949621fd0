"""
Модуль работы с эмодзи
Поиск, преобразование и классификация эмодзи в тексте
"""

from .codec import to_codepoint_id, from_codepoint_id, to_surrogate_literal
from .dictionary import EmojiDictionary, get_emoji_dictionary
from .patterns import PatternSet, get_pattern_set
from .processor import EmojiProcessor, get_emoji_processor, scan_replace
from .classifier import EmojiClassifier, get_emoji_classifier
from .provider import EmojiDataProvider

__all__ = [
    "to_codepoint_id",
    "from_codepoint_id",
    "to_surrogate_literal",
    "EmojiDictionary",
    "get_emoji_dictionary",
    "PatternSet",
    "get_pattern_set",
    "EmojiProcessor",
    "get_emoji_processor",
    "scan_replace",
    "EmojiClassifier",
    "get_emoji_classifier",
    "EmojiDataProvider"
]
