"""Unit tests for /src/pasture/herd.py"""

import pytest

from src.core.exceptions import InvalidHerdError
from src.core.models import HerdModel
from src.core.shared_types import Orientation
from src.pasture.coords import MAX_COORD, Coords
from src.pasture.herd import Herd, ranges_intersect

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


# -- GEOMETRY --
@pytest.mark.parametrize(
    "herd, end",
    [
        (Herd(Coords(2, 4), 3, H), Coords(4, 4)),
        (Herd(Coords(2, 4), 3, V), Coords(2, 6)),
        (Herd(Coords(0, 0), 1, H), Coords(0, 0)),
        (Herd(Coords(5, 9), 5, H), Coords(9, 9)),
    ],
)
def test_end(herd: Herd, end: Coords) -> None:
    assert herd.end() == end


def test_end_saturates() -> None:
    """The last sheep never runs past the largest coordinate, whatever the length."""
    herd = Herd(Coords(250, 0), 200, H)
    assert herd.end() == Coords(MAX_COORD, 0)
    herd = Herd(Coords(0, 250), 200, V)
    assert herd.end() == Coords(0, MAX_COORD)


def test_occupies_horizontal() -> None:
    herd = Herd(Coords(2, 4), 3, H)
    for x in (2, 3, 4):
        assert herd.occupies(Coords(x, 4))
    # just before / after and on the wrong row
    assert not herd.occupies(Coords(1, 4))
    assert not herd.occupies(Coords(5, 4))
    assert not herd.occupies(Coords(3, 5))


def test_occupies_vertical() -> None:
    herd = Herd(Coords(2, 4), 3, V)
    for y in (4, 5, 6):
        assert herd.occupies(Coords(2, y))
    assert not herd.occupies(Coords(2, 3))
    assert not herd.occupies(Coords(2, 7))
    assert not herd.occupies(Coords(3, 5))


# -- INTERSECTIONS --
@pytest.mark.parametrize(
    "s1, e1, s2, e2, expected",
    [
        (0, 2, 3, 5, False),  # disjoint
        (0, 3, 3, 5, True),  # touching at the end point
        (1, 4, 2, 3, True),  # containing
        (2, 2, 2, 2, True),  # same single point
        (4, 6, 0, 3, False),
    ],
)
def test_ranges_intersect(s1: int, e1: int, s2: int, e2: int, expected: bool) -> None:
    """Symmetric: the order in which the ranges are given does not matter."""
    assert ranges_intersect(s1, e1, s2, e2) == expected
    assert ranges_intersect(s2, e2, s1, e1) == expected


def test_crossing_herds_intersect() -> None:
    horizontal = Herd(Coords(1, 3), 4, H)  # (1,3)-(4,3)
    vertical = Herd(Coords(3, 1), 4, V)  # (3,1)-(3,4)
    assert horizontal.intersects(vertical)
    assert vertical.intersects(horizontal)


def test_parallel_neighbours_do_not_intersect() -> None:
    top = Herd(Coords(0, 0), 5, H)
    below = Herd(Coords(0, 1), 5, H)
    assert not top.intersects(below)


def test_herds_in_line_touching_intersect() -> None:
    first = Herd(Coords(0, 0), 3, H)  # (0,0)-(2,0)
    second = Herd(Coords(2, 0), 3, H)  # (2,0)-(4,0)
    assert first.intersects(second)


# -- VERIFICATION --
def test_verify_contained_herd() -> None:
    Herd(Coords(5, 9), 5, H).verify()
    Herd(Coords(9, 5), 5, V).verify()


@pytest.mark.parametrize(
    "herd",
    [
        Herd(Coords(3, 3), 0, H),  # no sheep
        Herd(Coords(6, 0), 5, H),  # sticks out east
        Herd(Coords(0, 6), 5, V),  # sticks out south
        Herd(Coords(10, 0), 2, V),  # starts off the pasture
        Herd(Coords(-1, 0), 2, H),  # negative origin
    ],
)
def test_verify_invalid_herd(herd: Herd) -> None:
    with pytest.raises(InvalidHerdError):
        herd.verify()


def test_model_roundtrip() -> None:
    model = HerdModel(x=4, y=6, length=3, orientation="vertical")
    herd = Herd.from_model(model)
    assert herd == Herd(Coords(4, 6), 3, V)
    assert herd.to_model() == model
