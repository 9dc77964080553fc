"""
Feature templates for boundary classification.

Each template names a weight family and the window slots its key is built
from. A key concatenates the chosen decisions first, then units, then
character types, e.g. ``BQ2`` joins decision 2 with the types at positions
3 and 4 into a key such as ``"BHI"``.

The family names and their slot assignments belong to the trained model and
must match the bundled weight data exactly.
"""

from typing import Dict, Iterator, NamedTuple, Tuple

from .window import ContextWindow


class FeatureTemplate(NamedTuple):
    family: str
    decisions: Tuple[int, ...] = ()
    units: Tuple[int, ...] = ()
    ctypes: Tuple[int, ...] = ()

    def key(self, window: ContextWindow) -> str:
        return (
            window.decisions(*self.decisions)
            + window.units(*self.units)
            + window.ctypes(*self.ctypes)
        )


FEATURE_TEMPLATES = (
    # previous decisions
    FeatureTemplate("UP1", decisions=(1,)),
    FeatureTemplate("UP2", decisions=(2,)),
    FeatureTemplate("UP3", decisions=(3,)),
    FeatureTemplate("BP1", decisions=(1, 2)),
    FeatureTemplate("BP2", decisions=(2, 3)),
    # raw characters
    FeatureTemplate("UW1", units=(1,)),
    FeatureTemplate("UW2", units=(2,)),
    FeatureTemplate("UW3", units=(3,)),
    FeatureTemplate("UW4", units=(4,)),
    FeatureTemplate("UW5", units=(5,)),
    FeatureTemplate("UW6", units=(6,)),
    FeatureTemplate("BW1", units=(2, 3)),
    FeatureTemplate("BW2", units=(3, 4)),
    FeatureTemplate("BW3", units=(4, 5)),
    FeatureTemplate("TW1", units=(1, 2, 3)),
    FeatureTemplate("TW2", units=(2, 3, 4)),
    FeatureTemplate("TW3", units=(3, 4, 5)),
    FeatureTemplate("TW4", units=(4, 5, 6)),
    # character types
    FeatureTemplate("UC1", ctypes=(1,)),
    FeatureTemplate("UC2", ctypes=(2,)),
    FeatureTemplate("UC3", ctypes=(3,)),
    FeatureTemplate("UC4", ctypes=(4,)),
    FeatureTemplate("UC5", ctypes=(5,)),
    FeatureTemplate("UC6", ctypes=(6,)),
    FeatureTemplate("BC1", ctypes=(2, 3)),
    FeatureTemplate("BC2", ctypes=(3, 4)),
    FeatureTemplate("BC3", ctypes=(4, 5)),
    FeatureTemplate("TC1", ctypes=(1, 2, 3)),
    FeatureTemplate("TC2", ctypes=(2, 3, 4)),
    FeatureTemplate("TC3", ctypes=(3, 4, 5)),
    FeatureTemplate("TC4", ctypes=(4, 5, 6)),
    # decisions combined with character types
    FeatureTemplate("UQ1", decisions=(1,), ctypes=(1,)),
    FeatureTemplate("UQ2", decisions=(2,), ctypes=(2,)),
    FeatureTemplate("UQ3", decisions=(3,), ctypes=(3,)),
    FeatureTemplate("BQ1", decisions=(2,), ctypes=(2, 3)),
    FeatureTemplate("BQ2", decisions=(2,), ctypes=(3, 4)),
    FeatureTemplate("BQ3", decisions=(3,), ctypes=(2, 3)),
    FeatureTemplate("BQ4", decisions=(3,), ctypes=(3, 4)),
    FeatureTemplate("TQ1", decisions=(2,), ctypes=(1, 2, 3)),
    FeatureTemplate("TQ2", decisions=(2,), ctypes=(2, 3, 4)),
    FeatureTemplate("TQ3", decisions=(3,), ctypes=(1, 2, 3)),
    FeatureTemplate("TQ4", decisions=(3,), ctypes=(2, 3, 4)),
)


def extract_features(window: ContextWindow) -> Iterator[Tuple[str, str]]:
    """Yield ``(family, key)`` for every template at the current window."""
    for template in FEATURE_TEMPLATES:
        yield template.family, template.key(window)


def feature_dict(window: ContextWindow) -> Dict[str, str]:
    """
    Return the current features as a ``{family: key}`` dict.

    Useful for inspecting why a boundary was or was not cut.
    """
    return dict(extract_features(window))
