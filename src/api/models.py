"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark, Outcome, Phase

PlayerName = str

MAX_RECENT_MATCHES = 100


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    # blank names are refused by the game itself, so the caller can re-prompt
    player_x_name: PlayerName
    player_o_name: PlayerName


class GetGameRequest(BaseModel):
    game_id: UUID


class MoveBody(BaseModel):
    index: int


class MoveRequest(BaseModel):
    game_id: UUID
    index: int


class RematchRequest(BaseModel):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class RecentMatchesRequest(BaseModel):
    limit: int = Field(default=10)

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, value: int) -> int:
        if not 1 <= value <= MAX_RECENT_MATCHES:
            raise InvalidRequestError(
                f"Can show between 1 and {MAX_RECENT_MATCHES} recent matches, not {value}."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[Mark, PlayerName]
    board: list[Optional[Mark]]
    board_state: str
    phase: Phase
    current_mark: Mark
    current_player: PlayerName
    move_count: int
    outcome: Optional[Outcome]
    winner: Optional[str]
    winning_line: Optional[list[int]]
    started_at: Optional[datetime]


class MatchResponse(BaseModel):
    number: int
    id: int
    created_at: datetime
    winner: str


class LeaderboardResponse(BaseModel):
    total_games: int
    matches: list[MatchResponse]


class MoveResponse(BaseModel):
    accepted: bool
    game: GameResponse
    # only filled in when this move finished the game
    leaderboard: Optional[LeaderboardResponse] = None
