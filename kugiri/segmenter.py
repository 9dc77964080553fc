"""
Japanese word segmentation.

The segmenter walks the text from left to right and decides, at every gap
between two characters, whether a word boundary belongs there. Each decision
is independent of any dictionary: the context window around the gap is
turned into features, the features are scored against the weight table, and
a positive score cuts the text. The decision is then remembered as context
for the next three gaps.

The text after the last gap is always emitted as the final token, so the
tokens joined without a separator give back the input exactly.

Example:
    >>> from kugiri.segmenter import Segmenter
    >>> segmenter = Segmenter()
    >>> segmenter.segment("私の名前は中野です")
    ['私', 'の', '名前', 'は', '中野', 'です']
    >>> segmenter.tokenize("私の名前は中野です", separator="|")
    '私|の|名前|は|中野|です'
"""

from typing import Iterator, List, Optional

from .exceptions import MissingInputError
from .results import SegmentationResult
from .scorer import BIAS, score
from .weights import WeightTable, default_weight_table
from .window import (
    BEGIN_MARKERS,
    BOUNDARY,
    END_MARKERS,
    NO_BOUNDARY,
    WINDOW_SIZE,
    ContextWindow,
    pad,
)

# Padded index of the first gap: the one before the second real character
_FIRST_GAP = len(BEGIN_MARKERS) + 1


class Segmenter:
    """
    Boundary classifier that splits Japanese text into tokens.

    A segmenter holds only its weights and bias; each call builds its own
    context window. One instance can therefore be shared between threads.

    Attributes:
        weights: The model weight table.
        bias: Constant added to every boundary score.

    Example:
        >>> segmenter = Segmenter()
        >>> segmenter.boundaries("私の名前")
        [1, 2]
    """

    def __init__(self, weights: Optional[WeightTable] = None, bias: int = BIAS):
        """
        Initialize the segmenter.

        Args:
            weights: Weight table to score boundaries with. If None, the
                     model bundled with the package is used.
            bias: Constant added to every boundary score. The default is the
                  bundled model's prior.
        """
        self.weights = weights if weights is not None else default_weight_table()
        self.bias = bias

    def _cuts(self, text: str) -> Iterator[int]:
        units, types = pad(text)
        window = ContextWindow(units[:WINDOW_SIZE], types[:WINDOW_SIZE])

        # The end markers only provide context; no gap is scored among them
        for i in range(_FIRST_GAP, len(units) - len(END_MARKERS)):
            window.advance(units[i + 2], types[i + 2])
            if score(window, self.weights, self.bias) > 0:
                window.record(BOUNDARY)
                yield i - len(BEGIN_MARKERS)
            else:
                window.record(NO_BOUNDARY)

    def boundaries(self, text: str) -> List[int]:
        """
        Return the character offsets at which ``text`` is cut.

        Offset ``k`` means a boundary between ``text[k - 1]`` and
        ``text[k]``. The start and end of the text are not included.
        """
        _check_text(text)
        if not text:
            return []
        return list(self._cuts(text))

    def segment(self, text: str) -> List[str]:
        """
        Split ``text`` into tokens.

        Args:
            text: The text to segment.

        Returns:
            List[str]: The tokens in order; empty for an empty string.

        Raises:
            MissingInputError: If ``text`` is None.
            TypeError: If ``text`` is not a string.
        """
        cuts = self.boundaries(text)
        if not text:
            return []

        starts = [0] + cuts
        ends = cuts + [len(text)]
        return [text[start:end] for start, end in zip(starts, ends)]

    def tokenize(self, text: str, separator: str = " ") -> str:
        """Segment ``text`` and join the tokens with ``separator``."""
        return separator.join(self.segment(text))

    def analyze(self, text: str) -> SegmentationResult:
        """Segment ``text`` into a ``SegmentationResult``."""
        return SegmentationResult(text=text, tokens=self.segment(text))

    def __repr__(self) -> str:
        return f"Segmenter(weights={self.weights!r}, bias={self.bias})"


def _check_text(text) -> None:
    if text is None:
        raise MissingInputError("no input text was supplied")
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")


_default_segmenter: Optional[Segmenter] = None


def default_segmenter() -> Segmenter:
    """Return the shared segmenter that uses the bundled model."""
    global _default_segmenter
    if _default_segmenter is None:
        _default_segmenter = Segmenter()
    return _default_segmenter


def segment(text: str) -> List[str]:
    """
    Split ``text`` into tokens with the bundled model.

    Example:
        >>> segment("今日はいい天気ですね。")
        ['今日', 'は', 'いい', '天気', 'です', 'ね', '。']
    """
    return default_segmenter().segment(text)


def tokenize(text: str, separator: str = " ") -> str:
    """Segment ``text`` with the bundled model and join with ``separator``."""
    return default_segmenter().tokenize(text, separator)


__all__ = ["Segmenter", "default_segmenter", "segment", "tokenize"]
