"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the domain layer (lower) and db layer (lower) will use model(s) defined here to send to/receive from the Service.
A GameModel is exactly the state that gets persisted for one game name.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type alias to make the models easier to read: (x, y)
CoordsPair = tuple[int, int]


@dataclass
class HerdModel:
    x: int
    y: int
    length: int
    orientation: str


@dataclass
class PlayerModel:
    username: str
    password: str
    herds: list[HerdModel]
    shots: list[CoordsPair] = field(default_factory=list)


@dataclass
class GameModel:
    """Transport-safe representation of a game's state used between Service, DB, and domain layers."""

    players: list[PlayerModel] = field(default_factory=list)  # in join order
    turn: str = "a"
    next_shot: Optional[CoordsPair] = None
