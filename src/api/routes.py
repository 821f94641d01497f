"""HTTP routes. The board UI calls these: a cell click plays a move, a move-list click jumps."""

from typing import Generator
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JumpToRequest,
    PlayMoveRequest,
)
from src.core.exceptions import GameError, GameStateError, RepositoryError
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import TicTacToeService

router = APIRouter(prefix="/games", tags=["games"])


class MoveBody(BaseModel):
    position: int


class JumpBody(BaseModel):
    move_index: int


def get_service(
    db: Session = Depends(get_db),
) -> Generator[TicTacToeService, None, None]:
    yield TicTacToeService(SQLGameRepository(db))


async def game_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Rejected input is reported back to the client. A corrupted stored game is our fault, not theirs."""
    if isinstance(exc, RepositoryError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, GameStateError):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_game(service: TicTacToeService = Depends(get_service)) -> GameResponse:
    return service.create_new_game()


@router.get("/{game_id}")
def get_game(
    game_id: UUID, service: TicTacToeService = Depends(get_service)
) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post("/{game_id}/moves")
def play_move(
    game_id: UUID, body: MoveBody, service: TicTacToeService = Depends(get_service)
) -> GameResponse:
    return service.play_move(PlayMoveRequest(game_id=game_id, position=body.position))


@router.post("/{game_id}/jump")
def jump_to(
    game_id: UUID, body: JumpBody, service: TicTacToeService = Depends(get_service)
) -> GameResponse:
    return service.jump_to(JumpToRequest(game_id=game_id, move_index=body.move_index))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(
    game_id: UUID, service: TicTacToeService = Depends(get_service)
) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))


EXCEPTION_HANDLERS = {GameError: game_error_handler}
