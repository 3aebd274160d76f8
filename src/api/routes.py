"""HTTP routes. Each request gets its own service, wired to the shared session store and a fresh database session."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.models import (
    GameResponse,
    GetGameRequest,
    LeaderboardResponse,
    MoveBody,
    MoveRequest,
    MoveResponse,
    RecentMatchesRequest,
    RematchRequest,
    ResetGameRequest,
    StartGameRequest,
)
from src.core.config import get_settings
from src.db.database import get_db
from src.db.sql_repository import SQLMatchRepository
from src.services.game_service import GameService
from src.services.recorder import MatchRecorder
from src.services.session_store import InMemorySessionStore, SessionStore

router = APIRouter()

session_store = InMemorySessionStore()


def get_session_store() -> SessionStore:
    return session_store


def get_game_service(
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
) -> GameService:
    recorder = MatchRecorder(SQLMatchRepository(db))
    return GameService(
        sessions, recorder, feed_limit=get_settings().recent_matches_limit
    )


@router.post(
    "/games",
    response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["game"],
)
def start_game(
    request: StartGameRequest, service: GameService = Depends(get_game_service)
) -> GameResponse:
    return service.start_game(request)


@router.get("/games/{game_id}", response_model=GameResponse, tags=["game"])
def get_game(
    game_id: UUID, service: GameService = Depends(get_game_service)
) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post("/games/{game_id}/moves", response_model=MoveResponse, tags=["game"])
def make_move(
    game_id: UUID, body: MoveBody, service: GameService = Depends(get_game_service)
) -> MoveResponse:
    return service.make_move(MoveRequest(game_id=game_id, index=body.index))


@router.post("/games/{game_id}/rematch", response_model=GameResponse, tags=["game"])
def rematch(
    game_id: UUID, service: GameService = Depends(get_game_service)
) -> GameResponse:
    return service.rematch(RematchRequest(game_id=game_id))


@router.delete(
    "/games/{game_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["game"]
)
def new_players(
    game_id: UUID, service: GameService = Depends(get_game_service)
) -> None:
    service.new_players(ResetGameRequest(game_id=game_id))


@router.get(
    "/matches/recent", response_model=LeaderboardResponse, tags=["leaderboard"]
)
def recent_matches(
    limit: Optional[int] = None, service: GameService = Depends(get_game_service)
) -> LeaderboardResponse:
    if limit is None:
        limit = get_settings().recent_matches_limit
    return service.recent_matches(RecentMatchesRequest(limit=limit))
