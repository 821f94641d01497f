"""Protocol repository (SQLAlchemy implementation lives in sql_repository.py, tests use a dictionary)"""

import threading
from typing import Protocol
from uuid import UUID

from src.core.models import GameModel

# Held around every load -> change -> store sequence, and around closing sessions.
# The default database is one SQLite connection shared by every session, so a session
# closing (rolling back) halfway through another one's write would undo it.
STORE_LOCK = threading.RLock()


class GameRepository(Protocol):
    """Game store for the lifetime of the process, one record per game ID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored game, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite history, cursor and status of an existing game. None for an unknown ID."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record and return what was stored."""
        ...
