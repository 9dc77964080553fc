"""
Pytest configuration and fixtures for kugiri tests.
"""

import pytest


@pytest.fixture
def sample_japanese_text():
    """Provide sample Japanese text for testing."""
    return "私の名前は中野です"


@pytest.fixture
def mixed_script_text():
    """Provide text mixing kanji, hiragana, katakana, Latin letters and punctuation."""
    return "ＴｉｎｙＳｅｇｍｅｎｔｅｒはJavaScriptだけで書かれた極めてコンパクトな日本語分かち書きソフトウェアです。"


@pytest.fixture
def weight_table():
    """The weight table bundled with the package."""
    from kugiri import default_weight_table
    return default_weight_table()


@pytest.fixture
def segmenter():
    """Create a segmenter using the bundled model."""
    from kugiri import Segmenter
    return Segmenter()


@pytest.fixture
def make_segmenter():
    """
    Build a segmenter from an in-memory weight table.

    Returns:
        Callable taking a ``{family: {key: weight}}`` dict and a bias.
    """
    from kugiri import Segmenter, WeightTable

    def factory(families, bias):
        return Segmenter(weights=WeightTable(families), bias=bias)

    return factory
