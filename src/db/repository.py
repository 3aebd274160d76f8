"""Protocol repository (the storage backend only needs to offer inserts and queries)"""

from typing import Protocol

from src.core.models import MatchModel, ScoreModel


class MatchRepository(Protocol):
    """Persistence layer orchestration. Records are append-only: there is no update or delete."""

    def add_match(self, winner: str) -> MatchModel:
        """Store a finished game's winner ('X', 'O' or 'draw') and return the stored record."""
        ...

    def add_score(self, score: ScoreModel) -> ScoreModel:
        """Store the detailed outcome of a finished game."""
        ...

    def recent_matches(self, limit: int) -> list[MatchModel]:
        """Most recent matches first, at most `limit` of them."""
        ...

    def count_matches(self) -> int:
        """Total number of recorded matches."""
        ...
