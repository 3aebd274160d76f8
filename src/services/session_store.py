"""In-memory home of the running game sessions. A session lives only as long as its interactive flow."""

from typing import Protocol
from uuid import UUID, uuid4

from src.tictactoe.game import GameSession


class SessionStore(Protocol):
    def add(self, session: GameSession) -> UUID:
        """Register a new session and return its ID."""
        ...

    def get(self, game_id: UUID) -> GameSession | None:
        """Get session by ID, if it exists."""
        ...

    def discard(self, game_id: UUID) -> GameSession | None:
        """Forget a session."""
        ...


class InMemorySessionStore:
    """Sessions kept in a dictionary. Each session has a single writer (its player's event stream), so no locking."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, GameSession] = {}

    def add(self, session: GameSession) -> UUID:
        game_id = uuid4()
        self._sessions[game_id] = session
        return game_id

    def get(self, game_id: UUID) -> GameSession | None:
        return self._sessions.get(game_id)

    def discard(self, game_id: UUID) -> GameSession | None:
        return self._sessions.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()
