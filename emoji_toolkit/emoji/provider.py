"""
Поставщик данных эмодзи
Загружает emoji.json (ключ - codepoint id) и превращает его в список EmojiRecord
"""

import json
import re
from importlib import resources
from pathlib import Path
from typing import Optional, List, Dict, Any, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emoji_toolkit.emoji.codec import to_codepoint_id, from_codepoint_id
from emoji_toolkit.models.emoji import EmojiRecord, create_emoji_record
from emoji_toolkit.utils.exceptions import EmojiDataError, EncodingError

# Настройка логгера модуля
logger = logger.bind(module="emoji_provider")

DATA_PACKAGE = "emoji_toolkit.data"
DATA_FILE = "emoji.json"

# Символы ASCII, которые сами по себе не являются эмодзи
EXCLUDED_CHARS = "0123456789#*"

# Служебные ключевые слова с версией (uc6, uc10, ...)
VERSION_KEYWORD_PATTERN = re.compile(r"uc\d+")


class EmojiDataProvider:
    """
    Поставщик записей эмодзи из JSON файла

    По умолчанию читает встроенный emoji_toolkit/data/emoji.json,
    порядок записей совпадает с порядком ключей в файле.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Инициализация поставщика

        Args:
            path: Путь к альтернативному emoji.json (None - встроенный файл)
        """
        self.path = Path(path) if path is not None else None

    @property
    def source(self) -> str:
        """Описание источника для логов и ошибок"""
        return str(self.path) if self.path else f"{DATA_PACKAGE}/{DATA_FILE}"

    def read(self) -> Dict[str, Dict[str, Any]]:
        """Прочитать сырой словарь codepoint id -> данные эмодзи"""
        try:
            if self.path is not None:
                text = self.path.read_text(encoding="utf-8")
            else:
                text = resources.files(DATA_PACKAGE).joinpath(DATA_FILE).read_text(encoding="utf-8")
            data = json.loads(text)
        except (OSError, ValueError) as e:
            raise EmojiDataError(self.source, str(e)) from e

        if not isinstance(data, dict):
            raise EmojiDataError(self.source, "ожидается JSON объект с ключами codepoint id")

        return data

    def load(self) -> List[EmojiRecord]:
        """
        Загрузить записи эмодзи

        Returns:
            Список EmojiRecord в порядке файла

        Raises:
            EmojiDataError: Файл не читается или запись невалидна
        """
        data = self.read()

        for char in EXCLUDED_CHARS:
            data.pop(to_codepoint_id(char), None)

        records = [self._convert(key, entry) for key, entry in data.items()]

        logger.info("Загружено {} эмодзи из {}", len(records), self.source)
        return records

    def _convert(self, key: str, entry: Dict[str, Any]) -> EmojiRecord:
        """Преобразовать одну запись emoji.json в EmojiRecord"""
        try:
            base = entry["code_points"]["base"]
            fully_qualified = entry["code_points"]["fully_qualified"]

            codepoints = [base] if base == fully_qualified else [base, fully_qualified]
            shortcodes = [entry["shortname"]] + list(entry.get("shortname_alternates") or [])
            tags = [
                keyword for keyword in entry.get("keywords") or []
                if not VERSION_KEYWORD_PATTERN.fullmatch(keyword)
            ]

            record = create_emoji_record(
                raw=from_codepoint_id(fully_qualified),
                name=entry["name"],
                category=entry["category"],
                codepoints=codepoints,
                shortcodes=shortcodes,
                ascii=entry.get("ascii"),
                tags=tags,
                version=entry.get("unicode_version", "")
            )
        except (KeyError, TypeError, EncodingError) as e:
            raise EmojiDataError(self.source, f"запись {key}: {e}") from e

        if not record.validate():
            raise EmojiDataError(self.source, f"запись {key} не прошла валидацию")

        return record
