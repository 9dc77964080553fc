"""
Kugiri: compact statistical word segmentation for Japanese.

Kugiri splits Japanese text, which is written without spaces between words,
into word-like tokens. It needs no dictionary: a pretrained linear model
scores every gap between two characters from the surrounding characters,
their character types and the decisions taken at the previous gaps, and
cuts wherever the score is positive.

Key Features:
    - No dictionary and no external resources; the model ships with the package
    - Lossless: the tokens joined without a separator give back the input
    - Deterministic and thread-safe
    - Command line: ``kugiri TEXT`` or ``python -m kugiri TEXT``

Quick Start:
    >>> from kugiri import segment
    >>> segment("私の名前は中野です")
    ['私', 'の', '名前', 'は', '中野', 'です']

Custom Model:
    >>> from kugiri import Segmenter, WeightTable
    >>> with open("weights.tsv", encoding="utf-8") as f:
    ...     table = WeightTable.from_tsv(f, source="weights.tsv")
    >>> segmenter = Segmenter(weights=table)
    >>> print(segmenter.analyze("今日はいい天気ですね。"))
    今日 は いい 天気 です ね 。

Classes:
    Segmenter: Boundary classifier that splits text into tokens.
    SegmentationResult: Tokens of one text with their character spans.
    WeightTable: Immutable feature weights of the model.

Functions:
    segment: Split text into a list of tokens with the bundled model.
    tokenize: Split text and join the tokens with a separator.
    char_type: Character type tag of a single character.
    default_weight_table: The weight table bundled with the package.
"""

__version__ = "0.1.0"
__author__ = "Noyu Ritsuji"

# Segmentation
from .segmenter import Segmenter, segment, tokenize

# Result class for structured output
from .results import SegmentationResult

# Model components
from .weights import WeightTable, default_weight_table
from .chartypes import char_type, char_types

# Exceptions
from .exceptions import KugiriError, ModelDataError, MissingInputError

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Segmentation
    "Segmenter",
    "segment",
    "tokenize",
    # Result class
    "SegmentationResult",
    # Model components
    "WeightTable",
    "default_weight_table",
    "char_type",
    "char_types",
    # Exceptions
    "KugiriError",
    "ModelDataError",
    "MissingInputError",
]
