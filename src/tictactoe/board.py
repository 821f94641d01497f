"""The Board is one immutable snapshot of the 3x3 grid, plus the rule that decides who won on it."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidBoardError, InvalidPositionError
from src.core.shared_types import Mark

BOARD_SIZE = 9
EMPTY_CELL = "."

# Fixed enumeration order: rows, columns, diagonals. First match wins.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

Cell = Optional[Mark]


@dataclass(frozen=True)
class Board:
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise InvalidBoardError(
                f"A board has exactly {BOARD_SIZE} cells, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls) -> Self:
        return cls(tuple([None] * BOARD_SIZE))

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Parse the storage format: 9 characters, row-major, e.g. 'XO..X...O'.

        'X' and 'O' are marks, '.' is an empty cell.
        """
        if len(board_str) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Board string must contain {BOARD_SIZE} characters: {board_str!r}"
            )
        cells: list[Cell] = []
        for character in board_str:
            if character == EMPTY_CELL:
                cells.append(None)
            elif character in Mark.__members__:
                cells.append(Mark(character))
            else:
                raise InvalidBoardError(
                    f"Cannot interpret {character!r} in board string {board_str!r}."
                )
        return cls(tuple(cells))

    def to_string(self) -> str:
        return "".join(cell.value if cell else EMPTY_CELL for cell in self.cells)

    def cell(self, position: int) -> Cell:
        _assert_on_board(position)
        return self.cells[position]

    def is_empty(self, position: int) -> bool:
        return self.cell(position) is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def with_mark(self, position: int, mark: Mark) -> Self:
        """New board equal to this one, except for the mark placed at 'position'. This board stays untouched."""
        _assert_on_board(position)
        cells = list(self.cells)
        cells[position] = mark
        return type(self)(tuple(cells))

    def render(self) -> str:
        """Three text rows, e.g. 'X|O|.'"""
        board_str = self.to_string()
        return "\n".join(
            "|".join(board_str[row : row + 3]) for row in range(0, BOARD_SIZE, 3)
        )


def calculate_winner(board: Board) -> Optional[Mark]:
    """The mark occupying all three cells of a winning line, or None if no line is complete."""
    for a, b, c in WINNING_LINES:
        first = board.cells[a]
        if first is not None and first == board.cells[b] == board.cells[c]:
            return first
    return None


def _assert_on_board(position: int) -> None:
    if not 0 <= position < BOARD_SIZE:
        raise InvalidPositionError(
            f"Position {position} is not on the board. Pick one from 0-{BOARD_SIZE - 1}."
        )
