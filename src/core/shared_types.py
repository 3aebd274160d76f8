"""
Type definitions used across layers
"""

from enum import StrEnum


class Mark(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self == Mark.X else Mark.X


class Outcome(StrEnum):
    """Result of a finished game. The value is what gets persisted as the winner of a match."""

    WIN_X = "X"
    WIN_O = "O"
    DRAW = "draw"

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        return cls.WIN_X if mark == Mark.X else cls.WIN_O


class Phase(StrEnum):
    NAME_ENTRY = "name entry"
    IN_PROGRESS = "in progress"
    TERMINAL = "terminal"
