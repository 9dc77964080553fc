"""
Sliding context window over the padded character sequence.

The window holds the six characters around a candidate boundary, their six
character types, and the decisions taken at the three previous boundaries.
Positions are numbered 1 to 6; the boundary being evaluated sits between
positions 3 and 4:

    unit:      1   2   3 | 4   5   6
    decision:  1   2   3

Bigram and trigram views are built on demand from the base slots, so moving
the window only ever touches the six units, six types and three decisions.

So that the first and last characters of the text see a full window, the
text is padded with three begin markers and three end markers, all typed as
``OTHER``.
"""

from collections import deque
from typing import List, Sequence, Tuple

from .chartypes import OTHER, char_types

WINDOW_SIZE = 6
HISTORY_SIZE = 3

BEGIN_MARKERS = ("B3", "B2", "B1")
END_MARKERS = ("E1", "E2", "E3")

BOUNDARY = "B"
NO_BOUNDARY = "O"
UNKNOWN = "U"


def pad(text: str) -> Tuple[List[str], List[str]]:
    """
    Pad ``text`` with sentinel markers.

    Returns:
        Tuple of (units, types): the characters of ``text`` framed by the
        begin and end markers, and the matching character types.
    """
    units = [*BEGIN_MARKERS, *text, *END_MARKERS]
    types = [OTHER] * len(BEGIN_MARKERS) + char_types(text) + [OTHER] * len(END_MARKERS)
    return units, types


class ContextWindow:
    """
    Six units, six types and three decisions around one boundary.

    A window belongs to a single segmentation call and is mutated in place
    as it moves along the text; it must not be shared.
    """

    __slots__ = ("_units", "_types", "_decisions")

    def __init__(
        self,
        units: Sequence[str],
        types: Sequence[str],
        decisions: Sequence[str] = (UNKNOWN,) * HISTORY_SIZE
    ):
        """
        Seed the window.

        Args:
            units: The first six units of the padded sequence.
            types: Their character types.
            decisions: The three previous decisions, oldest first.

        Raises:
            ValueError: If a sequence has the wrong length.
        """
        if len(units) != WINDOW_SIZE or len(types) != WINDOW_SIZE:
            raise ValueError(
                f"window needs {WINDOW_SIZE} units and types, "
                f"got {len(units)} and {len(types)}"
            )
        if len(decisions) != HISTORY_SIZE:
            raise ValueError(
                f"window needs {HISTORY_SIZE} decisions, got {len(decisions)}"
            )

        self._units = deque(units, maxlen=WINDOW_SIZE)
        self._types = deque(types, maxlen=WINDOW_SIZE)
        self._decisions = deque(decisions, maxlen=HISTORY_SIZE)

    def advance(self, unit: str, ctype: str) -> None:
        """Drop the oldest unit and type and admit a new rightmost pair."""
        self._units.append(unit)
        self._types.append(ctype)

    def record(self, decision: str) -> None:
        """Push the decision taken at the current boundary into the history."""
        self._decisions.append(decision)

    def unit(self, position: int) -> str:
        return self._units[position - 1]

    def ctype(self, position: int) -> str:
        return self._types[position - 1]

    def decision(self, position: int) -> str:
        return self._decisions[position - 1]

    def units(self, *positions: int) -> str:
        """Concatenate the units at the given 1-based positions."""
        return "".join(self._units[p - 1] for p in positions)

    def ctypes(self, *positions: int) -> str:
        """Concatenate the character types at the given 1-based positions."""
        return "".join(self._types[p - 1] for p in positions)

    def decisions(self, *positions: int) -> str:
        """Concatenate the decisions at the given 1-based positions."""
        return "".join(self._decisions[p - 1] for p in positions)

    def __repr__(self) -> str:
        return (
            f"ContextWindow(units={list(self._units)!r}, "
            f"types={''.join(self._types)!r}, "
            f"decisions={''.join(self._decisions)!r})"
        )
