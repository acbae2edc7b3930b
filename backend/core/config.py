import os
from dataclasses import dataclass
from functools import lru_cache


def _env_bool(name: str, default: bool = False) -> bool:
    value = (os.environ.get(name) or "").strip().lower()
    if not value:
        return default
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "MentorMe"
    env: str = "dev"
    database_url: str = "sqlite+aiosqlite:///./mentorme.db"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    db_echo: bool = False
    auto_create_schema: bool = True
    # Keep the first completion stamp instead of refreshing it on every evaluation.
    preserve_completed_on: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            database_url=os.getenv("DATABASE_URL") or cls.database_url,
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            db_echo=_env_bool("DB_ECHO", cls.db_echo),
            auto_create_schema=_env_bool("AUTO_CREATE_SCHEMA", cls.auto_create_schema),
            preserve_completed_on=_env_bool(
                "PROGRAM_PRESERVE_COMPLETED_ON", cls.preserve_completed_on
            ),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
