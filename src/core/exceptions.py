"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch the whole family at once."""


class GameError(Exception):
    """Base class for everything that can go wrong while handling a game."""


class InvalidBoardError(GameError):
    """A board (string) that does not describe 9 valid cells."""


class InvalidPositionError(GameError):
    """A cell index outside of the 3x3 grid."""


class InvalidJumpError(GameError):
    """Jumping to a move that is not in the history."""


class GameStateError(GameError):
    """Stored game data breaks the history invariants."""


class InvalidRequestError(GameError):
    """Request data that fails validation at the API boundary."""


class RepositoryError(GameError):
    """Game could not be found / stored."""
