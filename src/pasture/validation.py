"""
Pasture legality rules.

A pasture is checked exactly once, when its owner joins a game. After that it is trusted for the rest of the game.
"""

from collections import Counter

from src.core.exceptions import OverlappingHerdsError, WrongHerdCountError
from src.pasture.pasture import REQUIRED_HERD_COUNTS, Pasture


def validate_pasture(pasture: Pasture) -> None:
    """
    Raise if the pasture breaks any of the placement rules.
    ----

    1. The herd lengths must be exactly those in REQUIRED_HERD_COUNTS (too few and too many are both wrong).
    2. Every herd has sheep and fits within the pasture.
    3. No two herds share a cell.
    """
    _check_herd_counts(pasture)

    for herd in pasture.herds:
        herd.verify()

    _check_overlaps(pasture)


def _check_herd_counts(pasture: Pasture) -> None:
    counts = Counter(herd.length for herd in pasture.herds)
    # every length present, and every length required
    for length in sorted(set(counts) | set(REQUIRED_HERD_COUNTS)):
        expected = REQUIRED_HERD_COUNTS.get(length, 0)
        actual = counts.get(length, 0)
        if expected != actual:
            raise WrongHerdCountError(length=length, expected=expected, actual=actual)


def _check_overlaps(pasture: Pasture) -> None:
    """Pairwise. There are only five herds."""
    herds = pasture.herds
    for index_1, herd_1 in enumerate(herds):
        for index_2 in range(index_1 + 1, len(herds)):
            herd_2 = herds[index_2]
            if herd_1.intersects(herd_2):
                raise OverlappingHerdsError(
                    first_index=index_1,
                    second_index=index_2,
                    spans=(herd_1.span(), herd_2.span()),
                )
