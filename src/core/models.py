"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Type aliases to make the models easier to read
PlayerName = str
Winner = str  # "X", "O" or "draw" for a match, a player name or "draw" for a score


@dataclass(frozen=True)
class MatchModel:
    """Minimal record of a finished game: who won, and when. Used for the recent matches feed and the running count."""

    id: int
    created_at: datetime
    winner: Winner


@dataclass(frozen=True)
class ScoreModel:
    """Detailed record of a finished game."""

    player_name: PlayerName
    opponent_name: PlayerName
    winner: Winner
    moves: int
    duration_seconds: Optional[int]
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class RecordingResult:
    """What actually got stored after a game finished. A write that failed is None."""

    match: Optional[MatchModel]
    score: Optional[ScoreModel]

    @property
    def complete(self) -> bool:
        return self.match is not None and self.score is not None


@dataclass(frozen=True)
class LeaderboardEntry:
    number: int
    match: MatchModel


@dataclass(frozen=True)
class Leaderboard:
    """Fetched view of the most recent matches, owned by whoever displays it."""

    total_games: int
    entries: list[LeaderboardEntry] = field(default_factory=list)

    @classmethod
    def from_matches(cls, matches: list[MatchModel], total_games: int) -> "Leaderboard":
        """Newest match first, numbered counting down from the total."""
        return cls(
            total_games=total_games,
            entries=[
                LeaderboardEntry(number=total_games - position, match=match)
                for position, match in enumerate(matches)
            ],
        )
