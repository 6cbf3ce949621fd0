"""
Классификатор: состоит ли текст только из эмодзи
Считает символы эмодзи с учетом ZWJ последовательностей, VS16, оттенков кожи и keycap
"""

import sys
import threading
from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emoji_toolkit.utils.exceptions import InvalidArgumentError
from .codec import iter_scalars
from .dictionary import EmojiDictionary, get_emoji_dictionary

# Настройка логгера модуля
logger = logger.bind(module="emoji_classifier")

WHITESPACE = frozenset((0x0A, 0x0D, 0x09, 0x20))
SKIN_TONE_MODIFIERS = frozenset(range(0x1F3FB, 0x1F400))
ZERO_WIDTH_JOINER = 0x200D
VARIATION_SELECTOR_16 = 0xFE0F
OBJECT_REPLACEMENT_CHARACTER = 0xFFFC
COMBINING_ENCLOSING_KEYCAP = 0x20E3

# Цифры и символы, которые являются эмодзи только с VS16
KEYCAP_BASES = frozenset("0123456789#*")


class EmojiClassifier:
    """Проверка что текст состоит только из эмодзи"""

    def __init__(self, dictionary: EmojiDictionary):
        self.dictionary = dictionary

    def is_emoji(self, text: str, max_symbol_count: int = sys.maxsize) -> bool:
        """
        Определить, состоит ли строка только из эмодзи

        Пробелы, табуляция и переводы строк не учитываются. Можно ограничить
        количество символов, например чтобы показывать короткие сообщения
        из одних эмодзи крупнее.

        Args:
            text: Проверяемый текст
            max_symbol_count: Максимальное количество символов эмодзи

        Returns:
            True если текст содержит от 1 до max_symbol_count эмодзи и ничего больше
        """
        if text is None:
            raise InvalidArgumentError("text")

        next_must_be_vs16 = False
        ignore_next = False
        count = 0

        for scalar in iter_scalars(text):
            if scalar in WHITESPACE:
                continue

            if next_must_be_vs16:
                next_must_be_vs16 = False
                if scalar != VARIATION_SELECTOR_16:
                    return False

            if scalar in SKIN_TONE_MODIFIERS:
                continue

            if scalar == ZERO_WIDTH_JOINER:
                ignore_next = True
                continue

            if scalar == VARIATION_SELECTOR_16:
                continue

            if scalar == OBJECT_REPLACEMENT_CHARACTER:
                return False

            if scalar == COMBINING_ENCLOSING_KEYCAP:
                continue

            # символ присоединен к предыдущему через ZWJ
            if ignore_next:
                ignore_next = False
                continue

            count += 1
            if count > max_symbol_count:
                return False

            char = chr(scalar)
            if char in KEYCAP_BASES:
                next_must_be_vs16 = True
            elif self.dictionary.get_by_raw(char) is None:
                # неизвестный символ принимается только с VS16
                next_must_be_vs16 = True

        if next_must_be_vs16:
            return False

        return 0 < count <= max_symbol_count


# Глобальный экземпляр классификатора
_emoji_classifier: Optional[EmojiClassifier] = None
_emoji_classifier_lock = threading.Lock()


def get_emoji_classifier() -> EmojiClassifier:
    """Получить экземпляр EmojiClassifier"""
    global _emoji_classifier
    if _emoji_classifier is None:
        dictionary = get_emoji_dictionary()
        with _emoji_classifier_lock:
            if _emoji_classifier is None:
                _emoji_classifier = EmojiClassifier(dictionary)
                logger.debug("Классификатор эмодзи создан")
    return _emoji_classifier
