"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBMatch(Base):
    """One row per finished game. Append-only."""

    __tablename__ = "games"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    winner: Mapped[str] = mapped_column(String(8))
    created_at: Mapped[datetime] = mapped_column(default=utc_now, index=True)


class DBScore(Base):
    """Detailed outcome of a finished game. Append-only."""

    __tablename__ = "scores"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    player_name: Mapped[str]
    opponent_name: Mapped[str]
    winner: Mapped[str]
    moves: Mapped[int]
    duration_seconds: Mapped[Optional[int]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
