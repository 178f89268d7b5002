"""Implementation of (Game)Repository using SQLAlchemy"""

from dataclasses import asdict
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.exceptions import GameAlreadyExistsError
from src.core.models import GameModel, HerdModel, PlayerModel
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, name: str) -> GameModel | None:
        """Get game by name, if record exists."""
        game_db = self._fetch_game(name)
        if game_db:
            return self._to_model(game_db)
        return None

    def game_exists(self, name: str) -> bool:
        return self._fetch_game(name) is not None

    def create_game(self, name: str, game: GameModel) -> GameModel:
        """Store new game and return the stored data."""
        if self.game_exists(name):
            raise GameAlreadyExistsError(name)

        game_db = DBGame(name=name)
        self._apply(game_db, game)
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def update_game(self, name: str, game: GameModel) -> GameModel | None:
        """Overwrite the whole state of an existing record."""
        game_db = self._fetch_game(name)
        if not game_db:
            return None
        self._apply(game_db, game)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def _fetch_game(self, name: str) -> DBGame | None:
        query = select(DBGame).where(DBGame.name == name)
        return self.db.scalar(query)

    def _apply(self, game_db: DBGame, game: GameModel) -> None:
        """Copy data transfer model onto the SQLAlchemy model. Always assign new lists so JSON columns get flagged dirty."""
        game_db.players = [asdict(player) for player in game.players]
        game_db.turn = game.turn
        game_db.next_shot = list(game.next_shot) if game.next_shot is not None else None

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            players=[self._to_player_model(player) for player in game_db.players],
            turn=game_db.turn,
            next_shot=(
                (game_db.next_shot[0], game_db.next_shot[1])
                if game_db.next_shot is not None
                else None
            ),
        )

    def _to_player_model(self, data: dict[str, Any]) -> PlayerModel:
        # JSON has no tuples: shots come back as [x, y] lists
        return PlayerModel(
            username=data["username"],
            password=data["password"],
            herds=[HerdModel(**herd) for herd in data["herds"]],
            shots=[(shot[0], shot[1]) for shot in data["shots"]],
        )
