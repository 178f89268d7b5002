"""Protocol repository. The service only needs get/put/exists semantics keyed by game name."""

from typing import Protocol

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, name: str) -> GameModel | None:
        """Get game by name, if record exists."""
        ...

    def game_exists(self, name: str) -> bool:
        """Is there a record under this name?"""
        ...

    def create_game(self, name: str, game: GameModel) -> GameModel:
        """Store new game under a name that is not taken yet, and return the stored data."""
        ...

    def update_game(self, name: str, game: GameModel) -> GameModel | None:
        """Overwrite an existing record."""
        ...
