"""
Словарь эмодзи с индексами для быстрого поиска
Неизменяемая таблица записей: ascii -> запись, codepoint id -> запись, шорткод -> запись
"""

import threading
from typing import Optional, Dict, List, Sequence, Iterable

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emoji_toolkit.emoji.codec import to_codepoint_id
from emoji_toolkit.emoji.provider import EmojiDataProvider
from emoji_toolkit.models.emoji import EmojiRecord
from emoji_toolkit.utils.config import get_config
from emoji_toolkit.utils.exceptions import DuplicateEmojiKeyError, InvalidArgumentError
from emoji_toolkit.utils.html_formatter import image_tag, span_tag, DEFAULT_CLASS, DEFAULT_PATH, DEFAULT_EXT

# Настройка логгера модуля
logger = logger.bind(module="emoji_dictionary")


def _add_unique(index: Dict[str, EmojiRecord], index_name: str, key: str, emoji: EmojiRecord) -> None:
    if key in index:
        raise DuplicateEmojiKeyError(index_name, key)
    index[key] = emoji


class EmojiDictionary:
    """
    Таблица эмодзи с тремя индексами

    Строится один раз из последовательности записей и больше не меняется,
    поэтому может читаться из любого количества потоков без блокировок.
    """

    def __init__(
        self,
        records: Iterable[EmojiRecord],
        css_class: str = DEFAULT_CLASS,
        image_path: str = DEFAULT_PATH,
        image_ext: str = DEFAULT_EXT
    ):
        """
        Инициализация словаря

        Args:
            records: Записи эмодзи в порядке таблицы
            css_class: CSS класс тегов по умолчанию
            image_path: Путь к папке изображений по умолчанию
            image_ext: Расширение файлов изображений по умолчанию

        Raises:
            DuplicateEmojiKeyError: Ключ встречается в индексе дважды
        """
        self._records: tuple = tuple(records)
        self.css_class = css_class
        self.image_path = image_path
        self.image_ext = image_ext
        self._ascii_to_emoji: Dict[str, EmojiRecord] = {}
        self._point_to_emoji: Dict[str, EmojiRecord] = {}
        self._code_to_emoji: Dict[str, EmojiRecord] = {}

        for emoji in self._records:
            for token in emoji.ascii or ():
                _add_unique(self._ascii_to_emoji, "ascii", token, emoji)

            for codepoint in emoji.codepoints:
                _add_unique(self._point_to_emoji, "codepoint", codepoint, emoji)

            for shortcode in emoji.shortcodes:
                _add_unique(self._code_to_emoji, "shortcode", shortcode, emoji)

        logger.info(
            "Словарь эмодзи построен: {} записей, {} ascii, {} codepoint, {} шорткодов",
            len(self._records),
            len(self._ascii_to_emoji),
            len(self._point_to_emoji),
            len(self._code_to_emoji)
        )

    def get(self, value: str) -> Optional[EmojiRecord]:
        """
        Найти эмодзи по шорткоду, ascii эмотикону или raw строке

        Args:
            value: Шорткод (:smile:), ascii (:)) или raw строка

        Returns:
            EmojiRecord или None если не найден

        Raises:
            InvalidArgumentError: value равен None
        """
        if value is None:
            raise InvalidArgumentError("value")

        if value.startswith(":"):
            emoji = self._code_to_emoji.get(value)
            if emoji is not None:
                return emoji

        emoji = self._ascii_to_emoji.get(value)
        if emoji is not None:
            return emoji

        return self._point_to_emoji.get(to_codepoint_id(value))

    def get_by_ascii(self, token: str) -> Optional[EmojiRecord]:
        """Найти эмодзи только по ascii эмотикону"""
        return self._ascii_to_emoji.get(token)

    def get_by_raw(self, raw: str) -> Optional[EmojiRecord]:
        """Найти эмодзи только по raw строке"""
        return self._point_to_emoji.get(to_codepoint_id(raw))

    def get_ascii(self, value: str) -> Optional[str]:
        """Первый ascii эмотикон эмодзи или None"""
        emoji = self.get(value)
        if emoji is not None and emoji.ascii:
            return emoji.ascii[0]
        return None

    def get_raw(self, shortcode: str) -> Optional[str]:
        """Raw строка эмодзи по шорткоду или None"""
        emoji = self.get(shortcode)
        return emoji.raw if emoji is not None else None

    def get_shortcode(self, raw: str) -> Optional[str]:
        """Основной шорткод эмодзи по raw строке или None"""
        emoji = self.get(raw)
        return emoji.shortcode if emoji is not None else None

    def get_image(
        self,
        value: str,
        css: Optional[str] = None,
        path: Optional[str] = None,
        ext: Optional[str] = None
    ) -> Optional[str]:
        """
        Тег <img> для эмодзи

        Args:
            value: Шорткод, ascii или raw строка
            css: CSS класс (None - класс словаря)
            path: Путь к папке изображений (None - путь словаря)
            ext: Расширение файла (None - расширение словаря)

        Returns:
            Тег <img> или None если эмодзи не найден
        """
        emoji = self.get(value)
        if emoji is None:
            return None

        return image_tag(
            emoji,
            css=self.css_class if css is None else css,
            path=self.image_path if path is None else path,
            ext=self.image_ext if ext is None else ext
        )

    def get_span(self, value: str, css: Optional[str] = None) -> Optional[str]:
        """Тег <span> для эмодзи или None если эмодзи не найден"""
        emoji = self.get(value)
        if emoji is None:
            return None
        return span_tag(emoji, css=self.css_class if css is None else css)

    def find(self, query: str) -> List[EmojiRecord]:
        """
        Найти эмодзи по подстроке в названии, категории, шорткодах или тегах

        Поиск чувствителен к регистру, порядок - порядок таблицы.
        """
        if query is None:
            raise InvalidArgumentError("query")

        return [
            emoji for emoji in self._records
            if query in emoji.name
            or query in emoji.category
            or any(query in shortcode for shortcode in emoji.shortcodes)
            or any(query in tag for tag in emoji.tags or ())
        ]

    def has_emoji(self, raw: str) -> bool:
        """Проверить есть ли raw эмодзи в словаре"""
        return to_codepoint_id(raw) in self._point_to_emoji

    @property
    def all(self) -> Sequence[EmojiRecord]:
        """Все записи в порядке таблицы"""
        return self._records

    @property
    def count(self) -> int:
        """Количество эмодзи в таблице"""
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)


# Глобальный экземпляр словаря
_emoji_dictionary: Optional[EmojiDictionary] = None
_emoji_dictionary_lock = threading.Lock()


def get_emoji_dictionary() -> EmojiDictionary:
    """
    Получить экземпляр EmojiDictionary (создается один раз)

    Путь к данным и атрибуты HTML тегов берутся из конфигурации
    в момент создания словаря.
    """
    global _emoji_dictionary
    if _emoji_dictionary is None:
        with _emoji_dictionary_lock:
            if _emoji_dictionary is None:
                config = get_config()
                provider = EmojiDataProvider(config.get_data_path())
                _emoji_dictionary = EmojiDictionary(
                    provider.load(),
                    css_class=config.CSS_CLASS,
                    image_path=config.IMAGE_PATH,
                    image_ext=config.IMAGE_EXT
                )
    return _emoji_dictionary
