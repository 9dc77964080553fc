"""
Weight table for the boundary classification model.

The model is a table of integer weights grouped into named feature families
(``UW1`` for the character four positions before a boundary, ``BC2`` for the
character-type pair straddling it, and so on). Scoring a boundary is a series
of ``lookup(family, key)`` calls against this table.

Lookups that miss are not all equal:

- an unknown family scores ``-1``, marking a feature the model never had;
- a known family with an unseen key scores ``0``, a neutral contribution.

The bundled model lives in ``kugiri/data/weights.tsv`` as
tab-separated ``family key weight`` rows and is loaded once per process by
``default_weight_table()``.

Example:
    >>> from kugiri.weights import default_weight_table
    >>> table = default_weight_table()
    >>> table.lookup("UW4", "。")
    3508
    >>> table.lookup("UW4", "unseen")
    0
    >>> table.lookup("XX9", "anything")
    -1
"""

import functools
import logging
from importlib import resources
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import ModelDataError

logger = logging.getLogger(__name__)

UNKNOWN_FAMILY_WEIGHT = -1
UNSEEN_KEY_WEIGHT = 0

DEFAULT_WEIGHTS_RESOURCE = "weights.tsv"


class WeightTable:
    """
    Immutable mapping of feature family -> feature key -> weight.

    Instances are read-only after construction and safe to share between
    threads.

    Attributes:
        source: Where the weights came from, for error messages and logs.
    """

    def __init__(
        self,
        families: Mapping[str, Mapping[str, int]],
        source: str = "<memory>"
    ):
        """
        Initialize the table from an existing nested mapping.

        Args:
            families: Mapping of family name to a mapping of key to weight.
                The data is copied; later changes to it are not seen.
            source: Label used in logs and error messages.
        """
        self.source = source
        self._families = MappingProxyType({
            family: MappingProxyType(dict(weights))
            for family, weights in families.items()
        })

    @classmethod
    def from_triples(
        cls,
        triples: Iterable[Tuple[str, str, int]],
        source: str = "<memory>"
    ) -> "WeightTable":
        """
        Build a table from ``(family, key, weight)`` triples.

        Order does not matter, but each (family, key) pair may appear only
        once.

        Raises:
            ModelDataError: If a (family, key) pair is repeated.
        """
        families: Dict[str, Dict[str, int]] = {}
        for family, key, weight in triples:
            weights = families.setdefault(family, {})
            if key in weights:
                raise ModelDataError(
                    f"{source}: duplicate weight for family {family!r}, key {key!r}"
                )
            weights[key] = weight
        return cls(families, source=source)

    @classmethod
    def from_tsv(cls, lines: Iterable[str], source: str = "<memory>") -> "WeightTable":
        """
        Parse tab-separated ``family key weight`` rows.

        Blank lines and lines starting with ``#`` are skipped.

        Args:
            lines: The rows, with or without trailing newlines.
            source: Label used in error messages.

        Raises:
            ModelDataError: On a malformed row, a non-integer weight or a
                duplicated (family, key) pair.
        """
        return cls.from_triples(_parse_tsv(lines, source), source=source)

    def lookup(self, family: str, key: str) -> int:
        """
        Return the weight of ``key`` in ``family``.

        Returns:
            int: The stored weight; ``0`` if the family is known but the key
            is not; ``-1`` if the family itself is unknown.
        """
        weights = self._families.get(family)
        if weights is None:
            return UNKNOWN_FAMILY_WEIGHT
        return weights.get(key, UNSEEN_KEY_WEIGHT)

    @property
    def families(self) -> Tuple[str, ...]:
        """Sorted names of every family in the table."""
        return tuple(sorted(self._families))

    def family(self, name: str) -> Mapping[str, int]:
        """
        Return the read-only key -> weight mapping of one family.

        Raises:
            KeyError: If the family is unknown.
        """
        return self._families[name]

    def __contains__(self, family: object) -> bool:
        return family in self._families

    def __len__(self) -> int:
        return sum(len(weights) for weights in self._families.values())

    def __iter__(self) -> Iterator[Tuple[str, str, int]]:
        for family in self.families:
            for key, weight in self._families[family].items():
                yield family, key, weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightTable):
            return NotImplemented
        return self._families == other._families

    def __repr__(self) -> str:
        return (
            f"WeightTable(source={self.source!r}, "
            f"families={len(self._families)}, entries={len(self)})"
        )


def _parse_tsv(lines: Iterable[str], source: str) -> Iterator[Tuple[str, str, int]]:
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue

        fields = line.split("\t")
        if len(fields) != 3:
            raise ModelDataError(
                f"{source}:{lineno}: expected 3 tab-separated fields, got {len(fields)}"
            )

        family, key, raw_weight = fields
        try:
            weight = int(raw_weight)
        except ValueError:
            raise ModelDataError(
                f"{source}:{lineno}: weight {raw_weight!r} is not an integer"
            ) from None
        yield family, key, weight


@functools.lru_cache(maxsize=None)
def default_weight_table(resource: Optional[str] = None) -> WeightTable:
    """
    Load the weight table bundled with the package.

    The result is cached, so the data file is read once per process and
    every caller shares the same immutable table.

    Args:
        resource: File name inside ``kugiri/data``. Defaults to the
                  bundled model.

    Returns:
        WeightTable: The loaded table.
    """
    name = resource or DEFAULT_WEIGHTS_RESOURCE
    path = resources.files("kugiri.data").joinpath(name)
    text = path.read_text(encoding="utf-8")

    table = WeightTable.from_tsv(text.splitlines(), source=f"kugiri/data/{name}")
    logger.debug(
        "Loaded %d weights in %d families from %s",
        len(table), len(table.families), table.source
    )
    return table


__all__ = [
    "UNKNOWN_FAMILY_WEIGHT",
    "UNSEEN_KEY_WEIGHT",
    "WeightTable",
    "default_weight_table",
]
