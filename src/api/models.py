"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Orientation, Status
from src.pasture.coords import PASTURE_SIZE, Coords

GameName = str
PlayerName = str


# --- SHARED PAYLOADS ---
class Credentials(BaseModel):
    """Identity claim sent along with every request about a game."""

    game: GameName
    username: PlayerName
    password: str

    @field_validator(*["game", "username", "password"])
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Game name, username and password cannot be blank.")
        return value


class CoordsPayload(BaseModel):
    x: int
    y: int


class ShotCoords(CoordsPayload):
    """A shot must land on the pasture."""

    @model_validator(mode="after")
    def validate_on_pasture(self) -> Self:
        coords = Coords(self.x, self.y)
        if not coords.is_within_bounds():
            raise InvalidRequestError(
                f"Cannot shoot at {coords}. Coordinates run from 0 to {PASTURE_SIZE - 1}."
            )
        return self


class HerdPayload(BaseModel):
    coords: CoordsPayload
    length: int
    orientation: Orientation


class PasturePayload(BaseModel):
    herds: list[HerdPayload]


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    name: GameName

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Game name cannot be blank.")
        return value


class GetGameRequest(BaseModel):
    name: GameName


class JoinRequest(BaseModel):
    credentials: Credentials
    pasture: PasturePayload


class ShootRequest(BaseModel):
    credentials: Credentials
    coords: ShotCoords


class ConfirmRequest(BaseModel):
    credentials: Credentials
    coords: ShotCoords


class MyPastureRequest(BaseModel):
    credentials: Credentials


class MyShotsRequest(BaseModel):
    credentials: Credentials


class LastShotRequest(BaseModel):
    credentials: Credentials


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game: GameName
    players: list[PlayerName]
    status: Status
    turn: Optional[PlayerName]


class PastureResponse(BaseModel):
    herds: list[HerdPayload]
    shots: list[CoordsPayload]


class ShotsResponse(BaseModel):
    hits: list[CoordsPayload]
    misses: list[CoordsPayload]


class LastShotResponse(BaseModel):
    coords: Optional[CoordsPayload]
