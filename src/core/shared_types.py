"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    AWAITING_SHOT = "awaiting shot"
    AWAITING_CONFIRMATION = "awaiting confirmation"


class Orientation(StrEnum):
    """Orientation of a herd. Values are the encodings used in requests and storage."""

    HORIZONTAL = "horizontal"  # west to east
    VERTICAL = "vertical"  # north to south


class Side(StrEnum):
    """The two seats at the table. A is taken by the first player to join, B by the second."""

    A = "a"
    B = "b"

    @property
    def opposite(self) -> "Side":
        return Side.B if self == Side.A else Side.A
