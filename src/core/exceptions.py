"""
Custom exceptions.

Every failure of a requested operation is one of these. The service layer never swallows them,
so whoever sits on top (API router, CLI, ...) gets them unchanged.
"""


class GameError(Exception):
    """Base exception for anything that goes wrong while handling a game."""


# --- request / persistence layers ---
class InvalidRequestError(GameError):
    """
    Raised by the request models.
    NOTE: deliberately not a ValueError, so pydantic lets it through instead of wrapping it into a ValidationError.
    """


class RepositoryError(GameError):
    """Persistence layer did not behave as expected (ex. record vanished in between load and save)."""


# --- lifecycle ---
class GameAlreadyExistsError(GameError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Game with name {name!r} already exists.")


class GameNotFoundError(GameError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Game named {name!r} doesn't exist.")


class GameFullError(GameError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Game {name!r} is already full.")


class UsernameTakenError(GameError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username {username!r} is already taken.")


class GameNotReadyError(GameError):
    def __init__(self, player_count: int) -> None:
        self.player_count = player_count
        super().__init__(f"Not enough players in game. Need 2, found {player_count}.")


# --- pasture validation ---
class InvalidHerdError(GameError):
    """A single herd is empty or sticks out of the pasture."""


class WrongHerdCountError(GameError):
    def __init__(self, length: int, expected: int, actual: int) -> None:
        self.length = length
        self.expected = expected
        self.actual = actual
        if actual > expected:
            message = f"Too many herds of length {length}. You should only have {expected} but you have {actual}."
        else:
            message = f"You need {expected} herds of length {length}. Found only {actual}."
        super().__init__(message)


class OverlappingHerdsError(GameError):
    def __init__(
        self, first_index: int, second_index: int, spans: tuple[str, str]
    ) -> None:
        self.first_index = first_index
        self.second_index = second_index
        self.spans = spans
        super().__init__(
            f"Herd {first_index} {spans[0]} intersects with herd {second_index} {spans[1]}."
        )


# --- turn engine / authorization ---
class NotYourTurnError(GameError):
    """Credentials do not belong to the player expected to act now."""


class ShotAlreadyPendingError(GameError):
    """Cannot shoot again before the opponent confirmed the previous shot."""


class NoShotPendingError(GameError):
    """There is nothing to confirm."""


class AuthMismatchError(GameError):
    """Credentials do not match any player of the game."""
