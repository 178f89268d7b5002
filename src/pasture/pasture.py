"""A player's private board: the herds they placed, and the shots they have fired at their opponent."""

from dataclasses import dataclass, field

from src.pasture.coords import Coords
from src.pasture.herd import Herd

# herd length -> number of herds of that length every pasture must contain (17 sheep in total)
REQUIRED_HERD_COUNTS: dict[int, int] = {
    2: 1,
    3: 2,
    4: 1,
    5: 1,
}


@dataclass
class Shots:
    """Shots fired, split by whether they landed on a sheep."""

    hits: list[Coords]
    misses: list[Coords]


@dataclass
class Pasture:
    herds: list[Herd]
    shots: list[Coords] = field(default_factory=list)  # shots this player has made

    def is_occupied(self, cell: Coords) -> bool:
        return any(herd.occupies(cell) for herd in self.herds)

    def record_shot(self, cell: Coords) -> None:
        self.shots.append(cell)


def classify_shots(shots: list[Coords], target: Pasture) -> Shots:
    """Split the shots against the herds of the pasture that was shot at. Pure: nothing gets mutated."""
    hits: list[Coords] = []
    misses: list[Coords] = []
    for shot in shots:
        if target.is_occupied(shot):
            hits.append(shot)
        else:
            misses.append(shot)
    return Shots(hits=hits, misses=misses)
