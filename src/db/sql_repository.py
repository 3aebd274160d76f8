"""Implementation of (Match)Repository using SQLAlchemy"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import MatchModel, ScoreModel
from src.db.schema import DBMatch, DBScore

logger = logging.getLogger(__name__)


class SQLMatchRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add_match(self, winner: str) -> MatchModel:
        """Store a finished game's winner ('X', 'O' or 'draw') and return the stored record."""
        match_db = DBMatch(winner=winner)
        self._insert(match_db)
        return self._to_match_model(match_db)

    def add_score(self, score: ScoreModel) -> ScoreModel:
        """Store the detailed outcome of a finished game."""
        score_db = DBScore(
            player_name=score.player_name,
            opponent_name=score.opponent_name,
            winner=score.winner,
            moves=score.moves,
            duration_seconds=score.duration_seconds,
        )
        self._insert(score_db)
        return self._to_score_model(score_db)

    def recent_matches(self, limit: int) -> list[MatchModel]:
        """Most recent matches first, at most `limit` of them."""
        if limit <= 0:
            return []
        # id breaks ties between matches stored within the same clock tick
        query = (
            select(DBMatch)
            .order_by(DBMatch.created_at.desc(), DBMatch.id.desc())
            .limit(limit)
        )
        try:
            matches_db = self.db.scalars(query).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError("Could not fetch recent matches.") from exc
        return [self._to_match_model(match_db) for match_db in matches_db]

    def count_matches(self) -> int:
        """Total number of recorded matches."""
        try:
            return self.db.scalar(select(func.count()).select_from(DBMatch)) or 0
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError("Could not count matches.") from exc

    def _insert(self, record: DBMatch | DBScore) -> None:
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(
                f"Could not store record in {record.__tablename__!r}."
            ) from exc
        logger.debug("Stored record %s in %r", record.id, record.__tablename__)

    def _to_match_model(self, match_db: DBMatch) -> MatchModel:
        """Convert SQLAlchemy model to data transfer model."""
        return MatchModel(
            id=match_db.id,
            created_at=match_db.created_at,
            winner=match_db.winner,
        )

    def _to_score_model(self, score_db: DBScore) -> ScoreModel:
        """Convert SQLAlchemy model to data transfer model."""
        return ScoreModel(
            player_name=score_db.player_name,
            opponent_name=score_db.opponent_name,
            winner=score_db.winner,
            moves=score_db.moves,
            duration_seconds=score_db.duration_seconds,
            created_at=score_db.created_at,
        )
