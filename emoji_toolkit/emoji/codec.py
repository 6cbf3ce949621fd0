"""
Преобразования между строкой и codepoint id
Codepoint id - hex значения скаляров в нижнем регистре через дефис (1f468-200d-1f469)
"""

import re
import struct
from typing import Iterator, List

# Локальные импорты
from emoji_toolkit.utils.exceptions import EncodingError

MAX_SCALAR = 0x10FFFF
MAX_UINT32 = 0xFFFFFFFF

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

HEX_TOKEN_PATTERN = re.compile(r"[0-9a-fA-F]+")


def iter_scalars(text: str) -> Iterator[int]:
    """
    Перебрать скаляры строки

    Пара суррогатов (high + low) считается одним скаляром,
    любой другой символ - отдельным скаляром.
    """
    i = 0
    length = len(text)
    while i < length:
        unit = ord(text[i])
        if (HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END and i + 1 < length
                and LOW_SURROGATE_START <= ord(text[i + 1]) <= LOW_SURROGATE_END):
            low = ord(text[i + 1])
            yield 0x10000 + ((unit - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)
            i += 2
        else:
            yield unit
            i += 1


def scalar_to_utf16(scalar: int) -> List[int]:
    """
    Code units UTF-16 для одного скаляра

    Args:
        scalar: Скаляр Unicode

    Returns:
        Один code unit для BMP или пара суррогатов
    """
    if scalar <= 0xFFFF:
        return [scalar]

    if 0x10000 <= scalar <= MAX_SCALAR:
        value = scalar - 0x10000  # остается 20 бит
        high = (value >> 10) + HIGH_SURROGATE_START
        low = (value & 0x3FF) + LOW_SURROGATE_START
        return [high, low]

    raise EncodingError(format(scalar, "x"), "скаляр больше 0x10FFFF")


def to_codepoint_id(text: str) -> str:
    """
    Преобразовать строку в codepoint id

    Args:
        text: Строка (обычно эмодзи)

    Returns:
        Codepoint id, например "1f600" или "2764-fe0f"
    """
    return "-".join(format(scalar, "04x") for scalar in iter_scalars(text))


def _parse_scalars(codepoint_id: str) -> List[int]:
    scalars = []
    for token in codepoint_id.split("-"):
        if not HEX_TOKEN_PATTERN.fullmatch(token):
            raise EncodingError(codepoint_id, f"неверный hex токен {token!r}")

        scalar = int(token, 16)
        if scalar > MAX_UINT32:
            raise EncodingError(codepoint_id, f"токен {token!r} не помещается в 32 бита")
        if scalar > MAX_SCALAR:
            raise EncodingError(codepoint_id, f"скаляр {token} больше 0x10FFFF")

        scalars.append(scalar)
    return scalars


def to_utf16_units(codepoint_id: str) -> List[int]:
    """Code units UTF-16 для всех скаляров codepoint id по порядку"""
    units: List[int] = []
    for scalar in _parse_scalars(codepoint_id):
        units.extend(scalar_to_utf16(scalar))
    return units


def from_codepoint_id(codepoint_id: str) -> str:
    """
    Преобразовать codepoint id в строку

    Args:
        codepoint_id: Codepoint id, например "1f468-200d-1f469"

    Returns:
        Строка Unicode

    Raises:
        EncodingError: Неверный hex токен или скаляр больше 0x10FFFF
    """
    units = to_utf16_units(codepoint_id)
    data = struct.pack(f"<{len(units)}H", *units)
    return data.decode("utf-16-le", "surrogatepass")


def to_surrogate_literal(codepoint_id: str) -> str:
    """
    Преобразовать codepoint id в литерал с \\uXXXX escape последовательностями

    Используется для генерации паттернов, а не для поиска.
    """
    data = from_codepoint_id(codepoint_id).encode("utf-16-le", "surrogatepass")
    units = struct.unpack(f"<{len(data) // 2}H", data)
    return "".join(f"\\u{unit:04x}" for unit in units)
