"""
Tests for character type classification.

Run tests with: pytest tests/test_chartypes.py -v
"""

import pytest

from kugiri.chartypes import (
    ALPHABET,
    CHAR_EXCEPTIONS,
    CHAR_RANGES,
    CHAR_TYPES,
    HIRAGANA,
    KANJI,
    KANJI_NUMERAL,
    KATAKANA,
    NUMERAL,
    OTHER,
    char_type,
    char_types,
)


# =============================================================================
# Test Single Characters
# =============================================================================

class TestCharType:
    """Test classification of individual characters."""

    @pytest.mark.parametrize("char, expected", [
        ("漢", KANJI),
        ("あ", HIRAGANA),
        ("ア", KATAKANA),
        ("ｱ", KATAKANA),
        ("a", ALPHABET),
        ("Z", ALPHABET),
        ("ｚ", ALPHABET),
        ("Ａ", ALPHABET),
        ("7", NUMERAL),
        ("９", NUMERAL),
        ("。", OTHER),
        (" ", OTHER),
        ("€", OTHER),
    ])
    def test_known_characters(self, char, expected):
        """Test a representative character of each type."""
        assert char_type(char) == expected

    @pytest.mark.parametrize("char, expected", [
        ("ん", HIRAGANA),
        ("ヴ", KATAKANA),
        ("ﾝ", KATAKANA),
        ("z", ALPHABET),
        ("9", NUMERAL),
        ("０", NUMERAL),
        ("龠", KANJI),
    ])
    def test_range_ends_are_inclusive(self, char, expected):
        """Test that the last character of each range is classified."""
        assert char_type(char) == expected

    def test_every_range_member_has_its_tag(self):
        """Test totality over every declared range."""
        overridden = {c for chars, _ in CHAR_EXCEPTIONS for c in chars}
        for first, last, tag in CHAR_RANGES:
            for code in range(ord(first), ord(last) + 1):
                char = chr(code)
                if char not in overridden:
                    assert char_type(char) == tag, f"U+{code:04X}"

    def test_kanji_numerals_override_kanji_range(self):
        """Test that kanji numerals get their own tag, not the kanji tag."""
        for char in "一二三四五六七八九十百千万億兆":
            assert char_type(char) == KANJI_NUMERAL

    def test_iteration_marks_are_kanji(self):
        """Test the kanji repeat marks."""
        for char in "々〆ヵヶ":
            assert char_type(char) == KANJI

    def test_long_vowel_marks_are_katakana(self):
        """Test the long vowel and voicing marks."""
        for char in "ーｰﾞ":
            assert char_type(char) == KATAKANA

    def test_characters_outside_bmp_are_other(self):
        """Test that supplementary plane characters default to other."""
        assert char_type("😀") == OTHER
        assert char_type("𠮷") == OTHER

    def test_every_tag_is_a_single_letter(self):
        """Test the tag alphabet matches the model data keys."""
        assert set(CHAR_TYPES) == {"H", "I", "K", "A", "N", "M", "O"}

    @pytest.mark.parametrize("bad", ["", "ab", None, 3])
    def test_rejects_non_characters(self, bad):
        """Test that anything but a single character is rejected."""
        with pytest.raises(TypeError):
            char_type(bad)


# =============================================================================
# Test Whole Strings
# =============================================================================

class TestCharTypes:
    """Test classification of whole strings."""

    def test_empty_string(self):
        """Test that an empty string gives an empty list."""
        assert char_types("") == []

    def test_mixed_text(self):
        """Test a string mixing every type."""
        assert char_types("漢あアaZ9一。") == ["H", "I", "K", "A", "A", "N", "M", "O"]

    def test_matches_single_character_lookup(self, mixed_script_text):
        """Test that the vectorised path agrees with char_type."""
        text = mixed_script_text + "😀々ｰ"
        assert char_types(text) == [char_type(c) for c in text]
