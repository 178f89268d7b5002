"""A registered participant: credentials plus the pasture they joined with."""

import secrets
from dataclasses import dataclass
from typing import Self

from src.core.models import PlayerModel
from src.pasture.coords import Coords
from src.pasture.herd import Herd
from src.pasture.pasture import Pasture


@dataclass
class Player:
    username: str
    password: str
    pasture: Pasture

    @classmethod
    def from_model(cls, model: PlayerModel) -> Self:
        pasture = Pasture(
            herds=[Herd.from_model(herd) for herd in model.herds],
            shots=[Coords.from_pair(shot) for shot in model.shots],
        )
        return cls(model.username, model.password, pasture)

    def to_model(self) -> PlayerModel:
        return PlayerModel(
            username=self.username,
            password=self.password,
            herds=[herd.to_model() for herd in self.pasture.herds],
            shots=[shot.to_pair() for shot in self.pasture.shots],
        )

    def matches_credentials(self, username: str, password: str) -> bool:
        """
        Shared secret check. Both comparisons always run and neither branches on where the bytes differ,
        so the response time does not tell how much of a guess was right.
        """
        username_ok = secrets.compare_digest(
            _to_bytes(self.username), _to_bytes(username)
        )
        password_ok = secrets.compare_digest(
            _to_bytes(self.password), _to_bytes(password)
        )
        return username_ok & password_ok


def _to_bytes(value: str) -> bytes:
    # lone surrogates (ex. from a JSON "\ud800" escape) must still compare, not blow up
    return value.encode("utf-8", "surrogatepass")
