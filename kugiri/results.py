"""
Result class for segmentation.

Example:
    >>> from kugiri import Segmenter
    >>> result = Segmenter().analyze("私の名前は中野です")
    >>> print(result)
    私 の 名前 は 中野 です
    >>> result.spans[:2]
    [(0, 1), (1, 2)]
    >>> result.to_dict()["tokens"]
    ['私', 'の', '名前', 'は', '中野', 'です']
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple


@dataclass
class SegmentationResult:
    """
    Tokens of one segmented text.

    Attributes:
        text: The input text.
        tokens: The tokens, in order. Joined without a separator they give
                back ``text``.
    """

    text: str
    tokens: List[str] = field(default_factory=list)

    @property
    def spans(self) -> List[Tuple[int, int]]:
        """Character offsets ``(start, end)`` of each token in ``text``."""
        spans = []
        start = 0
        for token in self.tokens:
            end = start + len(token)
            spans.append((start, end))
            start = end
        return spans

    def join(self, separator: str = " ") -> str:
        return separator.join(self.tokens)

    def to_dict(self) -> Dict:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            Dict with ``text``, ``tokens`` and ``spans``.
        """
        return {
            "text": self.text,
            "tokens": list(self.tokens),
            "spans": [list(span) for span in self.spans],
        }

    def __str__(self) -> str:
        return self.join()

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)
