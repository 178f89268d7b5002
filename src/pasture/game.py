"""
The Game class will be the entrypoint into the domain layer for the service layer.
It holds the players (and their pastures), whose turn it is and the shot waiting to be confirmed.

Once two players have joined, `as_full()` hands out a FullGame: a short-lived view that knows about turns
and implements the shoot -> confirm protocol. Only the underlying Game ever gets persisted.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import (
    AuthMismatchError,
    GameFullError,
    GameNotReadyError,
    NoShotPendingError,
    NotYourTurnError,
    ShotAlreadyPendingError,
    UsernameTakenError,
)
from src.core.models import GameModel
from src.core.shared_types import Side, Status
from src.pasture.coords import Coords
from src.pasture.herd import Herd
from src.pasture.pasture import Pasture, Shots, classify_shots
from src.pasture.player import Player
from src.pasture.validation import validate_pasture


@dataclass
class GameState:
    players: dict[Side, Player] = field(default_factory=dict)
    turn: Side = Side.A  # who shoots next. Only meaningful once both seats are taken
    next_shot: Optional[Coords] = None  # shot waiting for confirmation


def current(state: GameState) -> Player:
    """The player whose turn it is."""
    _assert_full(state)
    return state.players[state.turn]


def other(state: GameState) -> Player:
    """The player being shot at."""
    _assert_full(state)
    return state.players[state.turn.opposite]


def _assert_full(state: GameState) -> None:
    if len(state.players) != 2:
        raise GameNotReadyError(len(state.players))


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    name: str
    state: GameState

    @classmethod
    def new_game(cls, name: str) -> Self:
        return cls(name=name, state=GameState())

    @classmethod
    def from_model(cls, name: str, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        # players are stored in join order: first seat A, then seat B
        players = {
            side: Player.from_model(player_model)
            for side, player_model in zip(Side, model.players)
        }
        next_shot = (
            Coords.from_pair(model.next_shot) if model.next_shot is not None else None
        )
        state = GameState(players=players, turn=Side(model.turn), next_shot=next_shot)
        return cls(name=name, state=state)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            players=[
                self.state.players[side].to_model()
                for side in Side
                if side in self.state.players
            ],
            turn=self.state.turn.value,
            next_shot=(
                self.state.next_shot.to_pair()
                if self.state.next_shot is not None
                else None
            ),
        )

    @property
    def status(self) -> Status:
        if len(self.state.players) < 2:
            return Status.WAITING_FOR_PLAYERS
        if self.state.next_shot is None:
            return Status.AWAITING_SHOT
        return Status.AWAITING_CONFIRMATION

    @property
    def usernames(self) -> list[str]:
        """Registered players, in join order."""
        return [self.state.players[side].username for side in Side if side in self.state.players]

    def register_player(self, username: str, password: str, herds: list[Herd]) -> Side:
        """
        Seat a new player with the herds they placed.
        ----

        1. There must be a free seat.
        2. The username must not be used by the player already seated.
        3. The pasture must be legal.
        """
        players = self.state.players
        if len(players) >= 2:
            raise GameFullError(self.name)

        if any(player.username == username for player in players.values()):
            raise UsernameTakenError(username)

        pasture = Pasture(herds=list(herds), shots=[])
        validate_pasture(pasture)

        side = Side.A if Side.A not in players else Side.B
        players[side] = Player(username, password, pasture)
        return side

    def as_full(self) -> "FullGame":
        return as_full(self)


def as_full(game: Game) -> "FullGame":
    """A view on the game that supports turns. Raises GameNotReadyError until both players joined."""
    _assert_full(game.state)
    return FullGame(game)


@dataclass
class FullGame:
    """This type represents a game that has been correctly configured and has two players."""

    game: Game

    @property
    def state(self) -> GameState:
        return self.game.state

    def player(self) -> Player:
        return current(self.state)

    def opponent(self) -> Player:
        return other(self.state)

    def shoot(self, username: str, password: str, coords: Coords) -> None:
        """Only the player whose turn it is may shoot, and only once per turn."""
        if not self.player().matches_credentials(username, password):
            raise NotYourTurnError(
                f"It's not your turn. Waiting for {self.player().username} to shoot."
            )
        if self.state.next_shot is not None:
            raise ShotAlreadyPendingError(
                f"Shot at {self.state.next_shot} is still waiting for confirmation."
            )
        self.state.next_shot = coords

    def confirm(self, username: str, password: str, coords: Coords) -> None:
        """
        Confirm the shot performed previously.
        ----

        We have to add this step to prevent players from running the game offline and checking all the cells themselves.
        The player being shot at confirms, the shot gets added to the shooter's record and the turn passes.
        """
        if not self.opponent().matches_credentials(username, password):
            raise NotYourTurnError("You do not have permissions to confirm this shot.")
        if self.state.next_shot is None:
            raise NoShotPendingError("There is no shot waiting for confirmation.")
        self.player().pasture.record_shot(coords)
        self._end_turn()

    def pasture_for(self, username: str, password: str) -> Pasture:
        return self.game.state.players[self._side_of(username, password)].pasture

    def shots_for(self, username: str, password: str) -> Shots:
        """Shots the caller has made, classified against the herds of their opponent."""
        side = self._side_of(username, password)
        shooter = self.state.players[side]
        target = self.state.players[side.opposite]
        return classify_shots(shooter.pasture.shots, target.pasture)

    def pending_shot(self, username: str, password: str) -> Optional[Coords]:
        """Either player may look at the shot waiting for confirmation."""
        self._side_of(username, password)
        return self.state.next_shot

    # -- PRIVATE HELPERS ---
    def _side_of(self, username: str, password: str) -> Side:
        # check both seats so a mismatch costs the same as a match on the second seat
        matches = {
            side: player.matches_credentials(username, password)
            for side, player in self.state.players.items()
        }
        for side, matched in matches.items():
            if matched:
                return side
        raise AuthMismatchError("You do not have permissions to get this information.")

    def _end_turn(self) -> None:
        self.state.next_shot = None
        self.state.turn = self.state.turn.opposite
