"""A herd: a line of sheep following each other, either west to east or north to south."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidHerdError
from src.core.models import HerdModel
from src.core.shared_types import Orientation
from src.pasture.coords import MAX_COORD, PASTURE_SIZE, Coords


@dataclass(frozen=True)
class Herd:
    coords: Coords  # north-west-most sheep
    length: int
    orientation: Orientation

    @classmethod
    def from_model(cls, model: HerdModel) -> Self:
        return cls(Coords(model.x, model.y), model.length, Orientation(model.orientation))

    def to_model(self) -> HerdModel:
        return HerdModel(
            x=self.coords.x,
            y=self.coords.y,
            length=self.length,
            orientation=self.orientation.value,
        )

    def end(self) -> Coords:
        """Location of the last sheep. Saturates instead of running past the largest coordinate."""
        offset = max(self.length - 1, 0)
        if self.orientation == Orientation.HORIZONTAL:
            return Coords(min(self.coords.x + offset, MAX_COORD), self.coords.y)
        return Coords(self.coords.x, min(self.coords.y + offset, MAX_COORD))

    def occupies(self, cell: Coords) -> bool:
        end = self.end()
        if self.orientation == Orientation.HORIZONTAL:
            return cell.y == self.coords.y and self.coords.x <= cell.x <= end.x
        return cell.x == self.coords.x and self.coords.y <= cell.y <= end.y

    def intersects(self, other: "Herd") -> bool:
        """
        A herd is a single cell wide, so if the projections on both axes overlap, the herds share a cell.
        """
        self_end = self.end()
        other_end = other.end()
        return ranges_intersect(
            self.coords.x, self_end.x, other.coords.x, other_end.x
        ) and ranges_intersect(self.coords.y, self_end.y, other.coords.y, other_end.y)

    def span(self) -> str:
        return f"from {self.coords} to {self.end()}"

    def verify(self) -> None:
        """Raise InvalidHerdError if the herd has no sheep or is not contained in the pasture."""
        if self.length <= 0:
            raise InvalidHerdError(f"Herd at {self.coords} has no sheep.")
        end = self.end()
        if (
            self.coords.x < 0
            or self.coords.y < 0
            or end.x >= PASTURE_SIZE
            or end.y >= PASTURE_SIZE
        ):
            raise InvalidHerdError(f"Herd at {self.coords} isn't contained in the pasture.")


def ranges_intersect(s1: int, e1: int, s2: int, e2: int) -> bool:
    """Do the two segments of the integer line overlap? Start and end are inclusive."""
    return (s2 <= s1 <= e2) or (s1 <= s2 <= e1)
