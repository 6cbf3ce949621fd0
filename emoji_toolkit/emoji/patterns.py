"""
Регулярные выражения для поиска эмодзи в тексте
Три паттерна (ascii, raw, шорткоды), каждый объединен с паттерном игнорируемой разметки
"""

import json
import re
import threading
from dataclasses import dataclass
from importlib import resources
from typing import Optional, List, Dict, Sequence, Pattern

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emoji_toolkit.emoji.codec import from_codepoint_id
from emoji_toolkit.emoji.dictionary import get_emoji_dictionary
from emoji_toolkit.emoji.provider import DATA_PACKAGE
from emoji_toolkit.models.emoji import EmojiRecord
from emoji_toolkit.utils.config import get_config
from emoji_toolkit.utils.exceptions import EmojiDataError

# Настройка логгера модуля
logger = logger.bind(module="emoji_patterns")

# Разметка, внутри которой эмодзи не заменяются
IGNORE_PATTERN = (
    r"<object[^>]*>.*?</object>"
    r"|<span[^>]*>.*?</span>"
    r"|<(?:object|embed|svg|img|div|span|p|a)[^>]*>"
)

# Ascii эмотикон: перед ним пробел или начало строки,
# после - пробел, конец строки или ! , .
ASCII_BEFORE = r"(?:^|(?<=\s))"
ASCII_AFTER = r"(?=\s|$|[!,\.])"

PAYLOAD_GROUP = "payload"

# Фрагменты, заранее построенные по встроенному emoji.json
FRAGMENTS_FILE = "patterns.json"
FRAGMENT_NAMES = ("ascii", "raw", "shortcode")


def _alternation(values: Sequence[str]) -> str:
    if not values:
        # ничего не совпадает
        return "(?!)"
    return "|".join(re.escape(value) for value in values)


def ascii_fragment(records: Sequence[EmojiRecord]) -> str:
    """Альтернатива всех ascii эмотиконов в порядке таблицы"""
    return _alternation([token for emoji in records for token in emoji.ascii or ()])


def raw_fragment(records: Sequence[EmojiRecord]) -> str:
    """
    Альтернатива всех raw строк (base и fully-qualified)

    Упорядочена по убыванию длины codepoint id, чтобы составные
    последовательности находились раньше их частей.
    """
    codepoints = [codepoint for emoji in records for codepoint in emoji.codepoints]
    codepoints.sort(key=len, reverse=True)
    return _alternation([from_codepoint_id(codepoint) for codepoint in codepoints])


def shortcode_fragment(records: Sequence[EmojiRecord]) -> str:
    """Альтернатива всех шорткодов и алиасов"""
    return _alternation([shortcode for emoji in records for shortcode in emoji.shortcodes])


def combine(payload: str, before: str = "", after: str = "") -> str:
    """Объединить паттерн игнорируемой разметки с паттерном кандидатов"""
    return f"(?:{IGNORE_PATTERN})|{before}(?P<{PAYLOAD_GROUP}>{payload}){after}"


def read_fragments() -> Dict[str, str]:
    """
    Прочитать встроенные фрагменты паттернов

    Returns:
        Словарь ascii/raw/shortcode -> альтернатива для встроенной таблицы

    Raises:
        EmojiDataError: Файл не читается или в нем нет нужных фрагментов
    """
    source = f"{DATA_PACKAGE}/{FRAGMENTS_FILE}"
    try:
        data = json.loads(resources.files(DATA_PACKAGE).joinpath(FRAGMENTS_FILE).read_text(encoding="utf-8"))
        fragments = {name: data[name] for name in FRAGMENT_NAMES}
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise EmojiDataError(source, str(e)) from e

    for name, fragment in fragments.items():
        if not isinstance(fragment, str):
            raise EmojiDataError(source, f"фрагмент {name} должен быть строкой")

    return fragments


@dataclass(frozen=True)
class PatternSet:
    """
    Скомпилированные паттерны поиска

    У совпадения пустая группа payload - игнорируемая разметка,
    непустая - кандидат на замену.
    """

    ascii: Pattern
    raw: Pattern
    shortcode: Pattern

    @classmethod
    def from_fragments(cls, ascii: str, raw: str, shortcode: str) -> "PatternSet":
        """
        Скомпилировать паттерны из готовых альтернатив

        Args:
            ascii: Альтернатива ascii эмотиконов
            raw: Альтернатива raw строк
            shortcode: Альтернатива шорткодов

        Returns:
            PatternSet
        """
        pattern_set = cls(
            ascii=re.compile(combine(ascii, ASCII_BEFORE, ASCII_AFTER)),
            raw=re.compile(combine(raw)),
            shortcode=re.compile(combine(shortcode), re.IGNORECASE)
        )

        logger.info(
            "Паттерны скомпилированы: ascii={} символов, raw={} символов, шорткоды={} символов",
            len(ascii), len(raw), len(shortcode)
        )
        return pattern_set

    @classmethod
    def from_records(cls, records: Sequence[EmojiRecord]) -> "PatternSet":
        """Построить и скомпилировать паттерны по записям эмодзи"""
        return cls.from_fragments(
            ascii=ascii_fragment(records),
            raw=raw_fragment(records),
            shortcode=shortcode_fragment(records)
        )

    def find_raw(self, text: str) -> List[str]:
        """Все raw эмодзи в тексте, кроме находящихся внутри разметки"""
        return [
            match.group(PAYLOAD_GROUP)
            for match in self.raw.finditer(text)
            if match.group(PAYLOAD_GROUP)
        ]


# Глобальный экземпляр паттернов
_pattern_set: Optional[PatternSet] = None
_pattern_set_lock = threading.Lock()


def get_pattern_set() -> PatternSet:
    """
    Получить экземпляр PatternSet (компилируется один раз)

    Для встроенной таблицы используются готовые фрагменты из patterns.json,
    для таблицы из EMOJI_DATA_PATH фрагменты строятся по записям.
    """
    global _pattern_set
    if _pattern_set is None:
        with _pattern_set_lock:
            if _pattern_set is None:
                if get_config().get_data_path() is None:
                    _pattern_set = PatternSet.from_fragments(**read_fragments())
                else:
                    _pattern_set = PatternSet.from_records(get_emoji_dictionary().all)
    return _pattern_set
