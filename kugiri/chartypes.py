"""
Character type classification for Japanese text.

Every character is mapped to a one-letter category tag. The tags are the
generalisation signal the segmentation model uses alongside the raw
characters, so their letters must match the keys in the bundled weight data:

    H  kanji                    I  hiragana
    K  katakana                 A  Latin letters
    N  digits                   M  kanji numerals
    O  anything else

The lookup table covers the Basic Multilingual Plane and is built once when
this module is imported. It is read-only afterwards, so it can be shared
freely between threads.

Example:
    >>> from kugiri.chartypes import char_type, char_types
    >>> char_type("漢")
    'H'
    >>> char_types("日本語テキスト")
    ['H', 'H', 'H', 'K', 'K', 'K', 'K']
"""

from typing import List

import numpy as np

KANJI = "H"
HIRAGANA = "I"
KATAKANA = "K"
ALPHABET = "A"
NUMERAL = "N"
KANJI_NUMERAL = "M"
OTHER = "O"

# Index 0 is the default, so a zeroed table means "everything is OTHER"
CHAR_TYPES = (OTHER, KANJI, HIRAGANA, KATAKANA, ALPHABET, NUMERAL, KANJI_NUMERAL)

# Inclusive (first, last, tag) ranges
CHAR_RANGES = (
    ("一", "龠", KANJI),
    ("ぁ", "ん", HIRAGANA),
    ("ァ", "ヴ", KATAKANA),
    ("ｱ", "ﾝ", KATAKANA),
    ("a", "z", ALPHABET),
    ("A", "Z", ALPHABET),
    ("ａ", "ｚ", ALPHABET),
    ("Ａ", "Ｚ", ALPHABET),
    ("0", "9", NUMERAL),
    ("０", "９", NUMERAL),
)

# Applied after the ranges, so these win over them
CHAR_EXCEPTIONS = (
    ("一二三四五六七八九十百千万億兆", KANJI_NUMERAL),
    ("々〆ヵヶ", KANJI),
    ("ーｰﾞ", KATAKANA),
)

_TABLE_SIZE = 0x10000


def _build_table() -> np.ndarray:
    table = np.zeros(_TABLE_SIZE, dtype=np.uint8)
    for first, last, tag in CHAR_RANGES:
        table[ord(first):ord(last) + 1] = CHAR_TYPES.index(tag)
    for chars, tag in CHAR_EXCEPTIONS:
        for char in chars:
            table[ord(char)] = CHAR_TYPES.index(tag)
    table.setflags(write=False)
    return table


_CHAR_TABLE = _build_table()


def char_type(char: str) -> str:
    """
    Return the category tag of a single character.

    Args:
        char: A string holding exactly one character.

    Returns:
        str: One of the tags in ``CHAR_TYPES``. Characters outside every
        known range, including those beyond the BMP, are ``OTHER``.

    Raises:
        TypeError: If ``char`` is not a one-character string.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError(f"char_type() expects a single character, got {char!r}")

    code = ord(char)
    if code >= _TABLE_SIZE:
        return OTHER
    return CHAR_TYPES[_CHAR_TABLE[code]]


def char_types(text: str) -> List[str]:
    """
    Classify every character of ``text`` in one pass.

    Args:
        text: The string to classify.

    Returns:
        List[str]: One tag per character, in order.
    """
    if not text:
        return []

    codes = np.fromiter(map(ord, text), dtype=np.int64, count=len(text))
    indices = np.zeros(len(codes), dtype=np.uint8)
    in_table = codes < _TABLE_SIZE
    indices[in_table] = _CHAR_TABLE[codes[in_table]]
    return [CHAR_TYPES[i] for i in indices]


__all__ = [
    "KANJI",
    "HIRAGANA",
    "KATAKANA",
    "ALPHABET",
    "NUMERAL",
    "KANJI_NUMERAL",
    "OTHER",
    "CHAR_TYPES",
    "CHAR_RANGES",
    "CHAR_EXCEPTIONS",
    "char_type",
    "char_types",
]
