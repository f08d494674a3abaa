"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "sqlite+pysqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
)

DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # HTTP listener (used by `python -m taskapi`)
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    API_PREFIX: str = "/api"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    DATABASE_URL: str = "sqlite:///./tasks.db"
    # Create missing tables at startup; disable when the schema is managed by alembic.
    DB_CREATE_TABLES: bool = True

    # Token signing secret. Algorithm and expiry are fixed in core.security.
    JWT_SECRET: SecretStr = SecretStr(DEFAULT_JWT_SECRET)

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///./tasks.db)"
            )
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @model_validator(mode="after")
    def require_real_secret_in_prod(self) -> "Settings":
        if self.APP_ENV == "prod" and self.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed from the default when APP_ENV=prod")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance built from the environment."""
    return Settings()
