"""Application settings, read from environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache

ENV_PREFIX = "TICTACTOE_"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name, str(default))
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./tictactoe.db"
    sql_echo: bool = False
    recent_matches_limit: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=_env("DATABASE_URL", cls.database_url),
            sql_echo=_env_bool("SQL_ECHO", cls.sql_echo),
            recent_matches_limit=int(
                _env("RECENT_MATCHES_LIMIT", str(cls.recent_matches_limit))
            ),
            log_level=_env("LOG_LEVEL", cls.log_level).upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
