"""
Boundary scoring.

The score of a boundary is the model bias plus the weight of every feature
extracted from the window around it. A positive score means "cut here".
"""

from .features import extract_features
from .weights import WeightTable
from .window import ContextWindow

# Negative prior: without evidence, a boundary is not cut
BIAS = -332


def score(window: ContextWindow, weights: WeightTable, bias: int = BIAS) -> int:
    """
    Score the boundary between positions 3 and 4 of ``window``.

    Args:
        window: The context around the boundary.
        weights: The model weights.
        bias: Constant added to the feature weights.

    Returns:
        int: The boundary score.
    """
    return bias + sum(
        weights.lookup(family, key) for family, key in extract_features(window)
    )
