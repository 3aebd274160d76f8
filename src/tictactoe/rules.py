"""Terminal conditions: three in a row, or a full board."""

from typing import Optional

from src.core.shared_types import Mark, Outcome
from src.tictactoe.board import WINNING_LINES, Board

Line = tuple[int, int, int]


def winning_line(board: Board) -> Optional[Line]:
    """
    First line holding three identical marks, if any.

    Lines are checked in a fixed order (rows, columns, diagonals). A board reached through alternating legal moves
    cannot hold complete lines for both marks (the game stops at the first one), so the order never changes the winner.
    """
    for line in WINNING_LINES:
        a, b, c = line
        mark = board.cells[a]
        if mark is not None and mark == board.cells[b] == board.cells[c]:
            return line
    return None


def winning_mark(board: Board) -> Optional[Mark]:
    line = winning_line(board)
    if line is None:
        return None
    return board.cells[line[0]]


def evaluate_outcome(board: Board) -> Optional[Outcome]:
    """Win for the mark with a complete line, draw on a full board without one, None while the game is in progress."""
    mark = winning_mark(board)
    if mark is not None:
        return Outcome.win_for(mark)
    if board.is_full():
        return Outcome.DRAW
    return None
