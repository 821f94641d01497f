"""Unit tests for /src/tictactoe/game.py"""

import pytest

from src.core.exceptions import GameStateError, InvalidJumpError, InvalidPositionError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.game import Game, mark_for_move

# X takes the top row, O plays on the middle row
X_WINS_TOP_ROW = [0, 3, 1, 4, 2]


def play(game: Game, positions: list[int]) -> Game:
    for position in positions:
        assert game.apply_move(position)
    return game


# -- CREATION LOGIC --
def test_new_game() -> None:
    game = Game.new_game()
    assert game.history == [Board.empty()]
    assert game.current_move == 0
    assert game.next_mark == Mark.X
    assert game.winner is None
    assert game.status == Status.IN_PROGRESS


def test_game_creation_from_model_roundtrip() -> None:
    expected_model = GameModel(
        history=[".........", "X........", "X...O....", "XX..O...."],
        current_move=2,
        status="in progress",
    )
    game = Game.from_model(expected_model)
    assert game.to_model() == expected_model
    assert all(isinstance(board, Board) for board in game.history)


@pytest.mark.parametrize(
    "history",
    [
        [],  # no starting board
        ["X........"],  # does not start empty
        [".........", "XO......."],  # two marks in a single move
        [".........", "O........"],  # O cannot move first
        [".........", "X........", "X........"],  # nothing changed
        [".........", "X........", "O........"],  # overwrote a mark
        [".........", "X..?....."],  # invalid board string
        [
            ".........",
            "X........",
            "X..O.....",
            "XX.O.....",
            "XX.OO....",
            "XXXOO....",
            "XXXOOO...",
        ],  # kept playing after X won
    ],
)
def test_from_model_rejects_corrupt_history(history: list[str]) -> None:
    model = GameModel(history=history, current_move=0, status="in progress")
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


@pytest.mark.parametrize("current_move", [-1, 2])
def test_from_model_rejects_cursor_outside_history(current_move: int) -> None:
    model = GameModel(
        history=[".........", "X........"],
        current_move=current_move,
        status="in progress",
    )
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


# -- PLAYING MOVES --
def test_apply_move_appends_snapshot() -> None:
    game = Game.new_game()
    assert game.apply_move(4)
    assert len(game.history) == 2
    assert game.current_move == 1
    assert game.current_board.cell(4) == Mark.X
    # the starting board is untouched
    assert game.history[0] == Board.empty()
    assert game.next_mark == Mark.O


def test_turns_alternate() -> None:
    """The cell filled at history index m holds X for odd m, O for even m."""
    positions = [4, 0, 8, 2, 6, 1]
    game = play(Game.new_game(), positions)
    for move_index, position in enumerate(positions, start=1):
        expected = Mark.X if move_index % 2 == 1 else Mark.O
        assert game.history[move_index].cell(position) == expected


def test_mark_for_move() -> None:
    assert mark_for_move(0) == Mark.X
    assert mark_for_move(1) == Mark.O
    assert mark_for_move(8) == Mark.X


def test_move_on_occupied_cell_is_ignored() -> None:
    game = play(Game.new_game(), [4])
    history_before = list(game.history)

    assert not game.apply_move(4)
    assert game.history == history_before
    assert game.current_move == 1


def test_move_after_win_is_ignored() -> None:
    game = play(Game.new_game(), X_WINS_TOP_ROW)
    assert game.winner == Mark.X
    history_before = list(game.history)

    assert not game.apply_move(8)
    assert game.history == history_before
    assert game.current_move == len(X_WINS_TOP_ROW)


@pytest.mark.parametrize("position", [-1, 9])
def test_move_off_the_board_raises(position: int) -> None:
    game = Game.new_game()
    with pytest.raises(InvalidPositionError):
        game.apply_move(position)
    assert game.history == [Board.empty()]


# -- TIME TRAVEL --
def test_jump_only_moves_cursor() -> None:
    game = play(Game.new_game(), [0, 4, 8])
    history_before = list(game.history)

    game.jump_to(1)
    assert game.current_move == 1
    assert game.current_board == history_before[1]
    assert game.history == history_before
    assert game.next_mark == Mark.O


def test_jump_back_and_forward() -> None:
    game = play(Game.new_game(), [0, 4, 8])
    game.jump_to(0)
    assert game.current_board == Board.empty()
    game.jump_to(3)
    assert game.current_board == game.history[-1]


@pytest.mark.parametrize("move_index", [-1, 4, 100])
def test_jump_out_of_range_is_rejected(move_index: int) -> None:
    game = play(Game.new_game(), [0, 4, 8])
    with pytest.raises(InvalidJumpError):
        game.jump_to(move_index)
    assert game.current_move == 3
    assert len(game.history) == 4


@pytest.mark.parametrize("jump_index", [0, 1, 2, 3])
def test_move_after_jump_discards_future(jump_index: int) -> None:
    game = play(Game.new_game(), [0, 4, 8, 2])
    kept = game.history[: jump_index + 1]

    game.jump_to(jump_index)
    assert game.apply_move(6)

    assert len(game.history) == jump_index + 2
    assert game.history[: jump_index + 1] == kept
    assert game.current_move == jump_index + 1
    assert game.current_board.cell(6) == mark_for_move(jump_index)


def test_jump_back_from_won_game_allows_play() -> None:
    """The winner is computed from the board being shown, not the last snapshot."""
    game = play(Game.new_game(), X_WINS_TOP_ROW)
    game.jump_to(3)
    assert game.winner is None
    assert game.apply_move(8)
    assert len(game.history) == 5


# -- STATUS --
def test_status_messages() -> None:
    game = Game.new_game()
    assert game.status_message() == "Next Player: X"
    game.apply_move(0)
    assert game.status_message() == "Next Player: O"

    game = play(Game.new_game(), X_WINS_TOP_ROW)
    assert game.status == Status.WON
    assert game.status_message() == "Winner: X"


def test_draw() -> None:
    # X O X / X O O / O X X
    game = play(Game.new_game(), [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert game.winner is None
    assert game.status == Status.DRAW
    assert game.status_message() == "Draw"


def test_move_descriptions() -> None:
    game = play(Game.new_game(), [0, 4])
    assert game.move_descriptions() == [
        "Go to game start",
        "Go to move #1",
        "Go to move #2",
    ]
