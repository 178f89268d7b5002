"""
A cell on the pasture

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# The pasture is always 10x10, cells are numbered 0-9 on both axes.
PASTURE_SIZE = 10

# Coordinates are stored as unsigned bytes on the wire. Computed cells saturate here instead of growing further.
MAX_COORD = 255


@dataclass(frozen=True)
class Coords:
    x: int
    y: int

    @classmethod
    def from_pair(cls, pair: tuple[int, int]) -> Coords:
        x, y = pair
        return cls(x, y)

    def to_pair(self) -> tuple[int, int]:
        return (self.x, self.y)

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < PASTURE_SIZE) and (0 <= self.y < PASTURE_SIZE)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
