"""
The GameSession is the entrypoint into the domain layer for the service layer.
It holds everything about one game between two named players and applies the rules when a cell gets clicked:
the service layer only decides what to do with the result (record a finished game, show the new state).
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Self

from src.core.exceptions import InvalidPlayerNameError
from src.core.shared_types import Mark, Outcome, Phase
from src.tictactoe.board import Board, is_valid_index
from src.tictactoe.rules import evaluate_outcome, winning_line

logger = logging.getLogger(__name__)

DRAW_DISPLAY_NAME = "draw"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    player_x_name: str
    player_o_name: str
    board: Board = field(default_factory=Board.empty)
    current_mark: Mark = Mark.X
    move_count: int = 0
    start_timestamp: Optional[datetime] = None
    outcome: Optional[Outcome] = None

    @classmethod
    def start(
        cls,
        player_x_name: str,
        player_o_name: str,
        now: Optional[datetime] = None,
    ) -> Self:
        """Both players confirmed their names: start a fresh game with X to move."""
        x_name = player_x_name.strip()
        o_name = player_o_name.strip()
        if not x_name or not o_name:
            raise InvalidPlayerNameError(
                "Cannot start the game. Both players need a (non-blank) name."
            )
        session = cls(
            player_x_name=x_name,
            player_o_name=o_name,
            start_timestamp=now or utc_now(),
        )
        logger.debug("Started game %s (X) vs %s (O)", x_name, o_name)
        return session

    @property
    def phase(self) -> Phase:
        return Phase.IN_PROGRESS if self.outcome is None else Phase.TERMINAL

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not None

    @property
    def current_player_name(self) -> str:
        return self.player_name(self.current_mark)

    @property
    def winner_name(self) -> Optional[str]:
        """Display name of the winner, the literal 'draw', or None while still playing."""
        if self.outcome is None:
            return None
        if self.outcome == Outcome.DRAW:
            return DRAW_DISPLAY_NAME
        if self.outcome == Outcome.WIN_X:
            return self.player_x_name
        return self.player_o_name

    @property
    def winning_line(self) -> Optional[tuple[int, int, int]]:
        return winning_line(self.board)

    def player_name(self, mark: Mark) -> str:
        return self.player_x_name if mark == Mark.X else self.player_o_name

    def apply_move(self, index: int) -> bool:
        """
        Place the mark of the player to move on the given cell.
        ----

        Clicking an occupied cell, a cell outside the board, or any cell once the game is over is harmless:
        nothing changes and False is returned.

        1. place the mark
        2. count the move
        3. check for a win / draw
        4. not over? --> other player's turn
        """
        if not self._accepts_move(index):
            logger.debug("Ignored move on cell %r (%s)", index, self.board.to_string())
            return False

        self.board.place(index, self.current_mark)
        self.move_count += 1
        self.outcome = evaluate_outcome(self.board)

        if self.outcome is None:
            self.current_mark = self.current_mark.opponent
        else:
            logger.info(
                "Game over after %d moves: %s (%s vs %s)",
                self.move_count,
                self.outcome,
                self.player_x_name,
                self.player_o_name,
            )
        return True

    def rematch(self, now: Optional[datetime] = None) -> None:
        """Same players, fresh board. X starts again."""
        self.board = Board.empty()
        self.current_mark = Mark.X
        self.move_count = 0
        self.outcome = None
        self.start_timestamp = now or utc_now()

    def elapsed_seconds(self, now: Optional[datetime] = None) -> Optional[int]:
        """Whole seconds since the start of the game (rounded down), None if the start was never recorded."""
        if self.start_timestamp is None:
            return None
        elapsed = (now or utc_now()) - self.start_timestamp
        return math.floor(elapsed.total_seconds())

    # -- PRIVATE HELPERS ---
    def _accepts_move(self, index: int) -> bool:
        if self.outcome is not None:
            return False
        if not is_valid_index(index):
            return False
        return self.board.is_empty(index)
