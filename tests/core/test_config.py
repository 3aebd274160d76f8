import pytest

from src.core.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["DATABASE_URL", "SQL_ECHO", "RECENT_MATCHES_LIMIT", "LOG_LEVEL"]:
        monkeypatch.delenv(f"TICTACTOE_{name}", raising=False)

    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.recent_matches_limit == 10
    assert settings.sql_echo is False


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICTACTOE_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("TICTACTOE_SQL_ECHO", "true")
    monkeypatch.setenv("TICTACTOE_RECENT_MATCHES_LIMIT", "25")
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.sql_echo is True
    assert settings.recent_matches_limit == 25
    assert settings.log_level == "DEBUG"
