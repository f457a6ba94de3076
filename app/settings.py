from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Raised at startup when required configuration is missing."""


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Postgres
    DATABASE_URL: str = ""
    DATABASE_SSLMODE: str = ""
    DB_POOL_SIZE: int = 3
    DB_POOL_TIMEOUT: int = 10
    DB_CONNECT_TIMEOUT: int = 5
    DB_STATEMENT_TIMEOUT_MS: int = 15000

    # Shared secret for mutating endpoints
    ADMIN_SECRET: str = ""

    # HTTP
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def postgres_url(self) -> str:
        # Pin the installed driver; bare postgresql:// resolves to psycopg 3 on newer SQLAlchemy
        url = self.DATABASE_URL
        for scheme in ("postgres://", "postgresql://"):
            if url.startswith(scheme):
                return "postgresql+psycopg2://" + url[len(scheme) :]
        return url

    def validate_required(self) -> None:
        missing = [
            name for name in ("DATABASE_URL", "ADMIN_SECRET") if not getattr(self, name)
        ]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
