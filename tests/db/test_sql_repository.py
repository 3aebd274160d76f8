"""Unit tests for src/db/sql_repository.py"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.db.schema import DBMatch, DBScore
from src.db.sql_repository import MatchModel, ScoreModel, SQLMatchRepository


def test_add_match(db_session_repo: Session) -> None:
    """Storing a winner returns the full record, with ID and creation time filled in by the database layer."""
    repo = SQLMatchRepository(db_session_repo)
    stored = repo.add_match("X")

    assert isinstance(stored, MatchModel)
    assert stored.winner == "X"
    assert isinstance(stored.id, int)
    assert isinstance(stored.created_at, datetime)
    assert db_session_repo.query(DBMatch).count() == 1


def test_add_score(db_session_repo: Session) -> None:
    score = ScoreModel(
        player_name="Alice",
        opponent_name="Bob",
        winner="Alice",
        moves=5,
        duration_seconds=42,
    )
    repo = SQLMatchRepository(db_session_repo)
    stored = repo.add_score(score)

    assert stored.player_name == "Alice"
    assert stored.opponent_name == "Bob"
    assert stored.winner == "Alice"
    assert stored.moves == 5
    assert stored.duration_seconds == 42
    assert stored.created_at is not None

    record = db_session_repo.query(DBScore).one()
    assert record.player_name == "Alice"
    assert record.winner == "Alice"


def test_add_score_without_duration(db_session_repo: Session) -> None:
    score = ScoreModel(
        player_name="Alice",
        opponent_name="Bob",
        winner="draw",
        moves=9,
        duration_seconds=None,
    )
    stored = SQLMatchRepository(db_session_repo).add_score(score)
    assert stored.duration_seconds is None
    assert stored.winner == "draw"


def test_recent_matches_newest_first(db_session_repo: Session) -> None:
    repo = SQLMatchRepository(db_session_repo)
    winners = ["X", "O", "draw", "X", "X"]
    stored_ids = [repo.add_match(winner).id for winner in winners]

    recent = repo.recent_matches(10)
    assert [match.id for match in recent] == list(reversed(stored_ids))
    assert [match.winner for match in recent] == list(reversed(winners))


def test_recent_matches_ordered_by_creation_time(db_session_repo: Session) -> None:
    """Creation time decides, not insertion order."""
    base = datetime(2024, 5, 1, 12, 0, 0)
    db_session_repo.add_all(
        [
            DBMatch(winner="X", created_at=base + timedelta(minutes=1)),
            DBMatch(winner="O", created_at=base + timedelta(minutes=3)),
            DBMatch(winner="draw", created_at=base),
        ]
    )
    db_session_repo.commit()

    recent = SQLMatchRepository(db_session_repo).recent_matches(10)
    assert [match.winner for match in recent] == ["O", "X", "draw"]
    created = [match.created_at for match in recent]
    assert created == sorted(created, reverse=True)


def test_recent_matches_respects_limit(db_session_repo: Session) -> None:
    repo = SQLMatchRepository(db_session_repo)
    for _ in range(15):
        repo.add_match("O")

    assert len(repo.recent_matches(10)) == 10
    assert len(repo.recent_matches(3)) == 3
    assert repo.recent_matches(0) == []
    assert repo.count_matches() == 15


def test_no_matches_yet(db_session_repo: Session) -> None:
    repo = SQLMatchRepository(db_session_repo)
    assert repo.recent_matches(10) == []
    assert repo.count_matches() == 0


def test_storage_failure_raises_repository_error(db_session_repo: Session) -> None:
    """Without tables, every operation fails. The SQLAlchemy error gets wrapped."""
    DBMatch.__table__.drop(bind=db_session_repo.get_bind())
    repo = SQLMatchRepository(db_session_repo)

    with pytest.raises(RepositoryError) as exc_info:
        repo.add_match("X")
    assert isinstance(exc_info.value.__cause__, OperationalError)

    with pytest.raises(RepositoryError):
        repo.recent_matches(10)
    with pytest.raises(RepositoryError):
        repo.count_matches()

    # session is still usable after the failed insert
    stored = repo.add_score(
        ScoreModel(
            player_name="Alice",
            opponent_name="Bob",
            winner="Bob",
            moves=6,
            duration_seconds=3,
        )
    )
    assert stored.winner == "Bob"
