"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JumpToRequest,
    MoveEntry,
    PlayMoveRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import STORE_LOCK, GameRepository
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe game.

    Every operation runs under STORE_LOCK: routes are served from a threadpool,
    and two clicks on the same game must not both build on the same snapshot.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Start a game from the empty board."""
        new_game = Game.new_game()
        with STORE_LOCK:
            stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        with STORE_LOCK:
            game = self._load_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def play_move(self, request: PlayMoveRequest) -> GameResponse:
        """
        Attempt to place the next mark.
        ----
        A move on a taken cell or after the game was won is ignored: the unchanged state is returned.
        """
        with STORE_LOCK:
            game = self._load_game(request.game_id)
            applied = game.apply_move(request.position)
            if applied:
                self.repo.update_game(request.game_id, game.to_model())

        if applied:
            logger.info(
                "Game %s: move #%d on cell %d (%s)",
                request.game_id,
                game.current_move,
                request.position,
                game.status_message(),
            )
        else:
            logger.info(
                "Game %s: move on cell %d rejected", request.game_id, request.position
            )

        return self._create_game_response(request.game_id, game)

    def jump_to(self, request: JumpToRequest) -> GameResponse:
        """Move the cursor through the history (time travel)."""
        with STORE_LOCK:
            game = self._load_game(request.game_id)
            game.jump_to(request.move_index)
            self.repo.update_game(request.game_id, game.to_model())
        logger.info("Game %s: jumped to move %d", request.game_id, request.move_index)
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with STORE_LOCK:
            self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game into a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            squares=list(game.current_board.cells),
            current_move=game.current_move,
            next_player=game.next_mark,
            winner=game.winner,
            status=game.status,
            status_message=game.status_message(),
            moves=[
                MoveEntry(
                    move_index=move_index,
                    description=description,
                    is_current=move_index == game.current_move,
                )
                for move_index, description in enumerate(game.move_descriptions())
            ],
        )

    def _load_game(self, game_id: UUID) -> Game:
        return Game.from_model(self._fetch_game(game_id))

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
