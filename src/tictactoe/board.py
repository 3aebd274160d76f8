"""The Game board: nine cells, row-major, each empty or holding a Mark."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import CellOccupiedError, InvalidCellError
from src.core.shared_types import Mark

# Board is always 3x3.
BOARD_DIMENSIONS = (3, 3)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
EMPTY_CHAR = "-"

Cell = Optional[Mark]

# rows, then columns, then diagonals
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


def is_valid_index(index: object) -> bool:
    # bool is a subclass of int, but True/False are not cell indices
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < BOARD_SIZE
    )


@dataclass
class Board:
    cells: list[Cell] = field(default_factory=lambda: [None] * BOARD_SIZE)

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise InvalidCellError(
                f"A board has exactly {BOARD_SIZE} cells, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Construct a board from its compact notation.

        Nine characters, read row by row from the top left: 'X', 'O' or '-' for an empty cell.
        ex. "XX-OO----" has X on cells 0 and 1, O on cells 3 and 4.
        Slashes between rows are allowed for readability: "XX-/OO-/---"
        """
        characters = board_str.replace("/", "")
        if len(characters) != BOARD_SIZE:
            raise InvalidCellError(
                f"Cannot read board {board_str!r}: expected {BOARD_SIZE} cells."
            )
        cells: list[Cell] = []
        for character in characters:
            if character == EMPTY_CHAR:
                cells.append(None)
            elif character.upper() in Mark.__members__:
                cells.append(Mark(character.upper()))
            else:
                raise InvalidCellError(
                    f"Cannot read board {board_str!r}: unknown cell {character!r}."
                )
        return cls(cells)

    def to_string(self) -> str:
        return "".join(EMPTY_CHAR if cell is None else cell.value for cell in self.cells)

    def cell(self, index: int) -> Cell:
        self._assert_valid_index(index)
        return self.cells[index]

    def is_empty(self, index: int) -> bool:
        return self.cell(index) is None

    def place(self, index: int, mark: Mark) -> None:
        """Put a mark on an empty cell."""
        if not self.is_empty(index):
            raise CellOccupiedError(
                f"Cell {index} already holds {self.cells[index]}."
            )
        self.cells[index] = mark

    def empty_cells(self) -> list[int]:
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self.cells if cell == mark)

    def rows(self) -> list[list[Cell]]:
        """3x3 view, convenient for display."""
        width = BOARD_DIMENSIONS[0]
        return [self.cells[start : start + width] for start in range(0, BOARD_SIZE, width)]

    def _assert_valid_index(self, index: int) -> None:
        if not is_valid_index(index):
            raise InvalidCellError(
                f"Cell index {index!r} is not on the board (0-{BOARD_SIZE - 1})."
            )
