"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from contextlib import contextmanager
from typing import Iterator

from src.api.models import (
    ConfirmRequest,
    CoordsPayload,
    GameResponse,
    GetGameRequest,
    HerdPayload,
    JoinRequest,
    LastShotRequest,
    LastShotResponse,
    MyPastureRequest,
    MyShotsRequest,
    NewGameRequest,
    PastureResponse,
    ShootRequest,
    ShotsResponse,
)
from src.core.exceptions import (
    GameAlreadyExistsError,
    GameError,
    GameNotFoundError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Orientation, Status
from src.db.repository import GameRepository
from src.pasture.coords import Coords
from src.pasture.game import Game
from src.pasture.herd import Herd

logger = logging.getLogger(__name__)


class HerdService:
    """
    Orchestration of layers for the herd game.

    Every operation is a single load -> validate -> mutate -> save sequence. Either the whole transition gets saved, or nothing.
    NOTE: nothing here protects against two concurrent requests on the same game. Callers must serialize access per game name.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Open a new game under a name that is not taken yet."""
        if self.repo.game_exists(request.name):
            logger.warning("Rejected new game: name %r is taken", request.name)
            raise GameAlreadyExistsError(request.name)

        game = Game.new_game(request.name)
        self.repo.create_game(game.name, game.to_model())
        logger.info("Created game %r", game.name)
        return self._create_game_response(game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve the public part of the game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        return self._create_game_response(self._load(request.name))

    def join(self, request: JoinRequest) -> GameResponse:
        """A player takes a seat with the pasture they prepared."""
        credentials = request.credentials
        game = self._load(credentials.game)

        herds = [self._to_herd(herd) for herd in request.pasture.herds]
        with _log_rejection("join", credentials.game, credentials.username):
            side = game.register_player(credentials.username, credentials.password, herds)

        self._save(game)
        logger.info(
            "Player %r joined game %r on side %s", credentials.username, game.name, side
        )
        return self._create_game_response(game)

    def shoot(self, request: ShootRequest) -> GameResponse:
        """The player whose turn it is fires at the opponent's pasture."""
        credentials = request.credentials
        game = self._load(credentials.game)
        coords = Coords(request.coords.x, request.coords.y)

        with _log_rejection("shoot", credentials.game, credentials.username):
            full_game = game.as_full()
            full_game.shoot(credentials.username, credentials.password, coords)

        self._save(game)
        logger.info("Player %r shot at %s in game %r", credentials.username, coords, game.name)
        return self._create_game_response(game)

    def confirm(self, request: ConfirmRequest) -> GameResponse:
        """The player being shot at acknowledges the shot, which passes the turn."""
        credentials = request.credentials
        game = self._load(credentials.game)
        coords = Coords(request.coords.x, request.coords.y)

        with _log_rejection("confirm", credentials.game, credentials.username):
            full_game = game.as_full()
            pending = game.state.next_shot
            full_game.confirm(credentials.username, credentials.password, coords)

        if pending != coords:
            logger.warning(
                "Player %r confirmed %s in game %r, but the pending shot was %s",
                credentials.username,
                coords,
                game.name,
                pending,
            )
        self._save(game)
        logger.info("Player %r confirmed shot at %s in game %r", credentials.username, coords, game.name)
        return self._create_game_response(game)

    def my_pasture(self, request: MyPastureRequest) -> PastureResponse:
        credentials = request.credentials
        game = self._load(credentials.game)
        with _log_rejection("read pasture", credentials.game, credentials.username):
            pasture = game.as_full().pasture_for(credentials.username, credentials.password)

        return PastureResponse(
            herds=[self._to_herd_payload(herd) for herd in pasture.herds],
            shots=[self._to_coords_payload(shot) for shot in pasture.shots],
        )

    def my_shots(self, request: MyShotsRequest) -> ShotsResponse:
        """Shots the caller has made so far, and which of them hit a sheep."""
        credentials = request.credentials
        game = self._load(credentials.game)
        with _log_rejection("read shots", credentials.game, credentials.username):
            shots = game.as_full().shots_for(credentials.username, credentials.password)

        return ShotsResponse(
            hits=[self._to_coords_payload(hit) for hit in shots.hits],
            misses=[self._to_coords_payload(miss) for miss in shots.misses],
        )

    def last_shot(self, request: LastShotRequest) -> LastShotResponse:
        """The shot waiting for confirmation, if any."""
        credentials = request.credentials
        game = self._load(credentials.game)
        with _log_rejection("read last shot", credentials.game, credentials.username):
            pending = game.as_full().pending_shot(credentials.username, credentials.password)

        return LastShotResponse(
            coords=self._to_coords_payload(pending) if pending is not None else None
        )

    # -- Internal helpers --
    def _load(self, name: str) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        model = self._fetch_game(name)
        return Game.from_model(name, model)

    def _fetch_game(self, name: str) -> GameModel:
        game_model = self.repo.get_game(name)
        if game_model is None:
            logger.warning("Game %r not found", name)
            raise GameNotFoundError(name)
        return game_model

    def _save(self, game: Game) -> None:
        if self.repo.update_game(game.name, game.to_model()) is None:
            raise RepositoryError(f"Game {game.name!r} disappeared before it could be saved.")

    def _create_game_response(self, game: Game) -> GameResponse:
        """Convert a Game into its public GameResponse. No passwords, herds or shots."""
        turn = None
        if game.status != Status.WAITING_FOR_PLAYERS:
            turn = game.state.players[game.state.turn].username
        return GameResponse(
            game=game.name,
            players=game.usernames,
            status=game.status,
            turn=turn,
        )

    def _to_herd(self, payload: HerdPayload) -> Herd:
        return Herd(
            coords=Coords(payload.coords.x, payload.coords.y),
            length=payload.length,
            orientation=Orientation(payload.orientation),
        )

    def _to_herd_payload(self, herd: Herd) -> HerdPayload:
        return HerdPayload(
            coords=self._to_coords_payload(herd.coords),
            length=herd.length,
            orientation=herd.orientation,
        )

    def _to_coords_payload(self, coords: Coords) -> CoordsPayload:
        return CoordsPayload(x=coords.x, y=coords.y)


@contextmanager
def _log_rejection(action: str, game: str, username: str) -> Iterator[None]:
    """Log a domain error at WARNING, then let it propagate unchanged."""
    try:
        yield
    except GameError as error:
        logger.warning("Rejected %s by %r in game %r: %s", action, username, game, error)
        raise
