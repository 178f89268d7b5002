"""Unit tests for /src/pasture/player.py"""

import pytest

from src.core.models import HerdModel, PlayerModel
from src.pasture.coords import Coords
from src.pasture.herd import Herd
from src.pasture.pasture import Pasture
from src.pasture.player import Player


@pytest.fixture
def player(valid_herds: list[Herd]) -> Player:
    return Player("alice", "s3cret", Pasture(herds=valid_herds))


@pytest.mark.parametrize(
    "username, password, expected",
    [
        ("alice", "s3cret", True),
        ("alice", "s3cre", False),  # prefix of the password
        ("alice", "s3cret!", False),
        ("bob", "s3cret", False),
        ("Alice", "s3cret", False),  # exact match only
        ("", "", False),
    ],
)
def test_matches_credentials(
    player: Player, username: str, password: str, expected: bool
) -> None:
    assert player.matches_credentials(username, password) is expected


def test_non_ascii_credentials() -> None:
    player = Player("schäfer", "wölfe", Pasture(herds=[]))
    assert player.matches_credentials("schäfer", "wölfe")
    assert not player.matches_credentials("schafer", "wölfe")


def test_lone_surrogate_credentials() -> None:
    """Strings that are not valid UTF-8 (lone surrogates) still compare instead of raising."""
    player = Player("alice", "pw\ud800", Pasture(herds=[]))
    assert player.matches_credentials("alice", "pw\ud800")
    assert not player.matches_credentials("alice", "pw\udfff")
    assert not player.matches_credentials("alice", "pw")


def test_lone_surrogate_guess_is_a_mismatch(player: Player) -> None:
    assert not player.matches_credentials("alice\ud800", "s3cret")
    assert not player.matches_credentials("alice", "s3cret\ud800")


def test_model_roundtrip() -> None:
    model = PlayerModel(
        username="alice",
        password="s3cret",
        herds=[HerdModel(x=0, y=0, length=2, orientation="horizontal")],
        shots=[(3, 3), (8, 8)],
    )
    player = Player.from_model(model)
    assert player.pasture.shots == [Coords(3, 3), Coords(8, 8)]
    assert player.to_model() == model
