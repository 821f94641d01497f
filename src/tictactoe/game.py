"""
The Game class will be the entrypoint into the domain layer for the service layer.
It keeps the full history of board snapshots plus a cursor (current_move) pointing at the snapshot being shown.
Playing a move appends a snapshot, jumping only moves the cursor.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidBoardError, InvalidJumpError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import BOARD_SIZE, Board, calculate_winner

logger = logging.getLogger(__name__)


def mark_for_move(move_index: int) -> Mark:
    """Mark to be placed when playing from history index 'move_index'. X plays from even indices."""
    return Mark.X if move_index % 2 == 0 else Mark.O


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    history: list[Board]
    current_move: int

    @classmethod
    def new_game(cls) -> Self:
        return cls(history=[Board.empty()], current_move=0)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        try:
            history = [Board.from_string(board_str) for board_str in model.history]
        except InvalidBoardError as e:
            raise GameStateError(f"Stored history contains an invalid board: {e}") from e

        _validate_history(history)
        if not 0 <= model.current_move < len(history):
            raise GameStateError(
                f"Current move {model.current_move} is outside of the history (length {len(history)})."
            )
        return cls(history, model.current_move)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            history=[board.to_string() for board in self.history],
            current_move=self.current_move,
            status=self.status.value,
        )

    @property
    def current_board(self) -> Board:
        return self.history[self.current_move]

    @property
    def next_mark(self) -> Mark:
        return mark_for_move(self.current_move)

    @property
    def winner(self) -> Optional[Mark]:
        return calculate_winner(self.current_board)

    @property
    def status(self) -> Status:
        if self.winner is not None:
            return Status.WON
        if self.current_board.is_full():
            return Status.DRAW
        return Status.IN_PROGRESS

    def apply_move(self, position: int) -> bool:
        """
        Place the next mark at 'position'.
        ----

        Silently ignored (returns False) if the cell is taken or the shown board already has a winner.
        Any snapshots after the cursor are discarded before the new one is appended.
        An off-board position raises InvalidPositionError.
        """
        board = self.current_board
        if not board.is_empty(position):
            logger.debug("Ignoring move on occupied cell %d", position)
            return False
        if calculate_winner(board) is not None:
            logger.debug("Ignoring move on cell %d, game already won", position)
            return False

        next_board = board.with_mark(position, self.next_mark)
        self.history = self.history[: self.current_move + 1] + [next_board]
        self.current_move = len(self.history) - 1
        return True

    def jump_to(self, move_index: int) -> None:
        """Show an earlier (or later) snapshot. History itself is never changed here."""
        if not 0 <= move_index < len(self.history):
            raise InvalidJumpError(
                f"Cannot jump to move {move_index}. Pick one from 0-{len(self.history) - 1}."
            )
        self.current_move = move_index

    def status_message(self) -> str:
        status = self.status
        if status == Status.WON:
            return f"Winner: {self.winner}"
        if status == Status.DRAW:
            return "Draw"
        return f"Next Player: {self.next_mark}"

    def move_descriptions(self) -> list[str]:
        """Labels for the move list, one per history snapshot."""
        return [
            f"Go to move #{move_index}" if move_index > 0 else "Go to game start"
            for move_index in range(len(self.history))
        ]


def _validate_history(history: list[Board]) -> None:
    """
    History invariants
    ----

    1. Never empty, starts from the empty board.
    2. Every snapshot adds exactly one mark to its predecessor, and it is the mark of the player whose turn it was.
    3. Nothing follows a snapshot that already has a winner.
    """
    if not history:
        raise GameStateError("History must contain at least the starting board.")
    if history[0] != Board.empty():
        raise GameStateError("History must start from the empty board.")

    for move_index, (before, after) in enumerate(zip(history, history[1:])):
        if calculate_winner(before) is not None:
            raise GameStateError(
                f"Snapshot {move_index + 1} follows a board already won by {calculate_winner(before)}."
            )
        changed = [
            position
            for position in range(BOARD_SIZE)
            if before.cells[position] != after.cells[position]
        ]
        if len(changed) != 1:
            raise GameStateError(
                f"Snapshot {move_index + 1} must differ from its predecessor by exactly one cell."
            )
        position = changed[0]
        if before.cells[position] is not None or after.cells[position] != mark_for_move(move_index):
            raise GameStateError(
                f"Snapshot {move_index + 1} must place {mark_for_move(move_index)} on an empty cell."
            )
