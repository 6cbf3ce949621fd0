"""
Процессор замены эмодзи в тексте
Преобразует шорткоды, raw эмодзи и ascii эмотиконы друг в друга и в HTML
"""

import threading
from typing import Optional, Callable, List, Pattern

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from .dictionary import EmojiDictionary, get_emoji_dictionary
from .patterns import PatternSet, PAYLOAD_GROUP, get_pattern_set

# Настройка логгера модуля
logger = logger.bind(module="emoji_processor")

Resolver = Callable[[str], Optional[str]]


def scan_replace(pattern: Pattern, text: str, resolver: Resolver) -> str:
    """
    Один проход замены по тексту слева направо

    Совпадение с игнорируемой разметкой копируется как есть,
    кандидат передается в resolver. Если resolver вернул None,
    исходный фрагмент остается без изменений.

    Args:
        pattern: Объединенный паттерн (разметка | кандидат)
        text: Исходный текст
        resolver: Функция кандидат -> замена или None

    Returns:
        Текст после замены
    """
    replacements = 0

    def replace(match) -> str:
        nonlocal replacements
        candidate = match.group(PAYLOAD_GROUP)
        if not candidate:
            return match.group(0)

        replacement = resolver(candidate)
        if replacement is None:
            return match.group(0)

        replacements += 1
        return replacement

    result = pattern.sub(replace, text)

    if replacements > 0:
        logger.debug("Выполнено {} замен", replacements)

    return result


class EmojiProcessor:
    """
    Процессор для преобразования эмодзи в тексте

    Все методы возвращают None без изменений, если текст равен None.
    """

    def __init__(self, dictionary: EmojiDictionary, patterns: PatternSet):
        """
        Инициализация процессора

        Args:
            dictionary: Словарь эмодзи
            patterns: Скомпилированные паттерны
        """
        self.dictionary = dictionary
        self.patterns = patterns

    def asciify(self, text: Optional[str]) -> Optional[str]:
        """
        Заменить шорткоды и raw эмодзи на ascii эквиваленты, например :wink: -> ;)

        Полезно для систем без поддержки unicode и изображений.
        """
        if text is None:
            return text

        # первый проход - шорткоды
        text = scan_replace(self.patterns.shortcode, text, self.dictionary.get_ascii)

        # второй проход - raw unicode
        return scan_replace(self.patterns.raw, text, self.dictionary.get_ascii)

    def emojify(self, text: Optional[str], ascii: bool = False) -> Optional[str]:
        """
        Заменить шорткоды на raw эмодзи

        Args:
            text: Исходный текст
            ascii: Также заменять ascii эмотиконы

        Returns:
            Текст с raw эмодзи
        """
        if text is None:
            return text

        text = scan_replace(self.patterns.shortcode, text, self.dictionary.get_raw)

        if ascii:
            text = scan_replace(self.patterns.ascii, text, self._ascii_to_raw)

        return text

    def demojify(self, text: Optional[str]) -> Optional[str]:
        """Заменить raw эмодзи на шорткоды"""
        if text is None:
            return text

        return scan_replace(self.patterns.raw, text, self.dictionary.get_shortcode)

    def imagify(
        self,
        text: Optional[str],
        ascii: bool = False,
        css: Optional[str] = None,
        path: Optional[str] = None,
        ext: Optional[str] = None
    ) -> Optional[str]:
        """
        Заменить шорткоды и raw эмодзи на теги <img>

        Args:
            text: Исходный текст
            ascii: Также заменять ascii эмотиконы
            css: CSS класс
            path: Путь к папке изображений
            ext: Расширение файла изображения

        Returns:
            Текст с тегами <img>
        """
        if text is None:
            return text

        # первый проход - шорткоды в raw
        text = self.emojify(text, ascii)

        return scan_replace(
            self.patterns.raw,
            text,
            lambda raw: self.dictionary.get_image(raw, css, path, ext)
        )

    def spanify(
        self,
        text: Optional[str],
        ascii: bool = False,
        css: Optional[str] = None
    ) -> Optional[str]:
        """Заменить шорткоды и raw эмодзи на теги <span>"""
        if text is None:
            return text

        text = self.emojify(text, ascii)

        return scan_replace(
            self.patterns.raw,
            text,
            lambda raw: self.dictionary.get_span(raw, css)
        )

    def find_emojis(self, text: str) -> List[str]:
        """
        Найти все raw эмодзи в тексте

        Args:
            text: Текст для поиска

        Returns:
            Список найденных эмодзи (разметка пропускается)
        """
        return self.patterns.find_raw(text)

    def _ascii_to_raw(self, token: str) -> Optional[str]:
        emoji = self.dictionary.get_by_ascii(token)
        return emoji.raw if emoji is not None else None


# Глобальный экземпляр процессора
_emoji_processor: Optional[EmojiProcessor] = None
_emoji_processor_lock = threading.Lock()


def get_emoji_processor() -> EmojiProcessor:
    """Получить экземпляр EmojiProcessor"""
    global _emoji_processor
    if _emoji_processor is None:
        dictionary = get_emoji_dictionary()
        patterns = get_pattern_set()
        with _emoji_processor_lock:
            if _emoji_processor is None:
                _emoji_processor = EmojiProcessor(dictionary, patterns)
    return _emoji_processor
