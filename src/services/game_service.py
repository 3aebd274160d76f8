"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from src.api.models import (
    GameResponse,
    GetGameRequest,
    LeaderboardResponse,
    MatchResponse,
    MoveRequest,
    MoveResponse,
    RecentMatchesRequest,
    RematchRequest,
    ResetGameRequest,
    StartGameRequest,
)
from src.core.exceptions import SessionNotFoundError
from src.core.models import Leaderboard
from src.core.shared_types import Mark
from src.services.recorder import MatchRecorder
from src.services.session_store import SessionStore
from src.tictactoe.game import GameSession, utc_now

logger = logging.getLogger(__name__)

DEFAULT_FEED_LIMIT = 10


class GameService:
    """Orchestration of layers for a tic-tac-toe game."""

    def __init__(
        self,
        sessions: SessionStore,
        recorder: MatchRecorder,
        clock: Callable[[], datetime] = utc_now,
        feed_limit: int = DEFAULT_FEED_LIMIT,
    ) -> None:
        self.sessions = sessions
        self.recorder = recorder
        self.clock = clock
        self.feed_limit = feed_limit

    # -- API routes logic ---
    def start_game(self, request: StartGameRequest) -> GameResponse:
        """Both players entered their names: start a game."""

        # The game refuses blank names (raises InvalidPlayerNameError)
        session = GameSession.start(
            request.player_x_name, request.player_o_name, now=self.clock()
        )

        # Keep the session around for the following moves
        game_id = self.sessions.add(session)
        logger.info("New game %s: %s vs %s", game_id, session.player_x_name, session.player_o_name)

        return self._create_game_response(game_id, session)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        session = self._fetch_session(request.game_id)
        return self._create_game_response(request.game_id, session)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        A cell got clicked.
        ----

        Ignored clicks (occupied cell, game over, off the board) return the unchanged state.
        When the move ends the game, the game gets recorded (exactly once, as no move is accepted afterwards)
        and the refreshed leaderboard is sent along.
        """
        session = self._fetch_session(request.game_id)

        accepted = session.apply_move(request.index)

        leaderboard = None
        if accepted and session.is_terminal:
            self.recorder.record_completed_game(session, now=self.clock())
            leaderboard = self._create_leaderboard_response(
                self.recorder.leaderboard(self.feed_limit)
            )

        return MoveResponse(
            accepted=accepted,
            game=self._create_game_response(request.game_id, session),
            leaderboard=leaderboard,
        )

    def rematch(self, request: RematchRequest) -> GameResponse:
        """Play again with the same players."""
        session = self._fetch_session(request.game_id)
        session.rematch(now=self.clock())
        logger.info("Rematch in game %s", request.game_id)
        return self._create_game_response(request.game_id, session)

    def new_players(self, request: ResetGameRequest) -> None:
        """Back to name entry: the session is gone for good."""
        if self.sessions.discard(request.game_id) is None:
            raise SessionNotFoundError(f"Game with {request.game_id=} not found.")
        logger.info("Game %s closed, back to name entry", request.game_id)

    def recent_matches(self, request: RecentMatchesRequest) -> LeaderboardResponse:
        """Feed of the most recent matches."""
        return self._create_leaderboard_response(
            self.recorder.leaderboard(request.limit)
        )

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, session: GameSession) -> GameResponse:
        """Convert a GameSession into a GameResponse (for game with given ID.)"""
        line = session.winning_line
        return GameResponse(
            game_id=game_id,
            players={
                Mark.X: session.player_x_name,
                Mark.O: session.player_o_name,
            },
            board=list(session.board.cells),
            board_state=session.board.to_string(),
            phase=session.phase,
            current_mark=session.current_mark,
            current_player=session.current_player_name,
            move_count=session.move_count,
            outcome=session.outcome,
            winner=session.winner_name,
            winning_line=list(line) if line else None,
            started_at=session.start_timestamp,
        )

    def _create_leaderboard_response(self, leaderboard: Leaderboard) -> LeaderboardResponse:
        return LeaderboardResponse(
            total_games=leaderboard.total_games,
            matches=[
                MatchResponse(
                    number=entry.number,
                    id=entry.match.id,
                    created_at=entry.match.created_at,
                    winner=entry.match.winner,
                )
                for entry in leaderboard.entries
            ],
        )

    def _fetch_session(self, game_id: UUID) -> GameSession:
        """Attempt to find the session and raise error if it fails."""
        session = self.sessions.get(game_id)
        if session is None:
            raise SessionNotFoundError(f"Game with {game_id=} not found.")
        return session
