"""Application factory: FastAPI app with routes, error mapping, logging and database setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import get_settings
from src.core.exceptions import (
    GameError,
    GameStateError,
    InvalidRequestError,
    SessionNotFoundError,
)
from src.core.logging_config import configure_logging
from src.db.database import init_db

logger = logging.getLogger(__name__)

# starlette renamed its 422 constant between releases
UNPROCESSABLE = 422

ERROR_STATUS: dict[type[GameError], int] = {
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    GameStateError: UNPROCESSABLE,
    InvalidRequestError: UNPROCESSABLE,
}


def status_for(exc: GameError) -> int:
    """Most specific mapping wins, anything unmapped is a server error."""
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_STATUS:
            return ERROR_STATUS[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_game_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, GameError)
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


def create_app(with_database: bool = True) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Tic Tac Toe API",
        description="Hot-seat tic-tac-toe: play a game, record finished matches, show the recent ones.",
        version="0.1.0",
        lifespan=lifespan if with_database else None,
    )
    app.add_exception_handler(GameError, handle_game_error)
    app.include_router(router)
    return app


app = create_app()
