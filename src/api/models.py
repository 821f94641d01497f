"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark, Status
from src.tictactoe.board import BOARD_SIZE


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class PlayMoveRequest(BaseModel):
    game_id: UUID
    position: int

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Cannot interpret position: {value!r} as a cell. Pick one from 0-{BOARD_SIZE - 1}."
            )
        return value


class JumpToRequest(BaseModel):
    game_id: UUID
    move_index: int

    @field_validator("move_index")
    @classmethod
    def validate_move_index(cls, value: int) -> int:
        # upper bound depends on the stored history, the Game checks that one
        if value < 0:
            raise InvalidRequestError(f"Move index cannot be negative: {value!r}")
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class MoveEntry(BaseModel):
    move_index: int
    description: str
    is_current: bool


class GameResponse(BaseModel):
    game_id: UUID
    squares: list[Optional[Mark]]
    current_move: int
    next_player: Mark
    winner: Optional[Mark]
    status: Status
    status_message: str
    moves: list[MoveEntry]
