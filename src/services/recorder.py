"""Turns a finished game into persisted records, and reads the recent ones back for display."""

import logging
from datetime import datetime
from typing import Optional

from src.core.exceptions import GameStateError, RepositoryError
from src.core.models import (
    Leaderboard,
    MatchModel,
    RecordingResult,
    ScoreModel,
)
from src.db.repository import MatchRepository
from src.tictactoe.game import GameSession

logger = logging.getLogger(__name__)


class MatchRecorder:
    """
    Best-effort persistence of finished games.
    ----

    Two independent writes per game: the match (winner mark only, for the feed and the running count) and the
    score (names, moves, duration). There is no transaction across them, and a failing backend never breaks the
    game: failures get logged and the game carries on.
    """

    def __init__(self, repository: MatchRepository) -> None:
        self.repo = repository

    def record_completed_game(
        self, session: GameSession, now: Optional[datetime] = None
    ) -> RecordingResult:
        """Store both records for a session that just reached its terminal state."""
        if session.outcome is None:
            raise GameStateError("Cannot record a game that is still in progress.")

        score = ScoreModel(
            player_name=session.player_x_name,
            opponent_name=session.player_o_name,
            winner=session.winner_name or "",
            moves=session.move_count,
            duration_seconds=session.elapsed_seconds(now),
        )

        stored_match = self._store_match(session.outcome.value)
        stored_score = self._store_score(score)
        return RecordingResult(match=stored_match, score=stored_score)

    def fetch_recent_matches(self, limit: int) -> list[MatchModel]:
        """Most recent matches first. An unreachable backend just means there is nothing to show."""
        if limit <= 0:
            return []
        try:
            matches = self.repo.recent_matches(limit)
        except RepositoryError:
            logger.warning("Could not fetch the recent matches", exc_info=True)
            return []
        return matches[:limit]

    def leaderboard(self, limit: int) -> Leaderboard:
        """Recent matches together with the number of games played so far."""
        matches = self.fetch_recent_matches(limit)
        try:
            total_games = self.repo.count_matches()
        except RepositoryError:
            # without a count, fall back on the size of the page we do have
            logger.warning("Could not count the matches played", exc_info=True)
            total_games = len(matches)
        return Leaderboard.from_matches(matches, max(total_games, len(matches)))

    # -- Internal helpers --
    def _store_match(self, winner: str) -> MatchModel | None:
        try:
            match = self.repo.add_match(winner)
        except RepositoryError:
            logger.error("Failed to record match (winner=%s)", winner, exc_info=True)
            return None
        logger.info("Recorded match %s (winner=%s)", match.id, winner)
        return match

    def _store_score(self, score: ScoreModel) -> ScoreModel | None:
        try:
            stored = self.repo.add_score(score)
        except RepositoryError:
            logger.error(
                "Failed to record score for %s vs %s",
                score.player_name,
                score.opponent_name,
                exc_info=True,
            )
            return None
        logger.info(
            "Recorded score %s vs %s: winner=%s, %d moves",
            stored.player_name,
            stored.opponent_name,
            stored.winner,
            stored.moves,
        )
        return stored
