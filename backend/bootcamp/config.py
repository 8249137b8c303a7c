"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Mail and frontend values are only read here; services receive them as arguments
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://bootcamp:bootcamp@db:5432/bootcamp"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    secret_key: str = "change-me"
    token_algorithm: str = "HS256"
    token_expiry_days: int = 2
    bcrypt_rounds: int = 10

    # Mail (SMTP). Empty host disables delivery (messages are logged only).
    mail_host: str = ""
    mail_port: int = 465
    mail_user: str = ""
    mail_password: str = ""
    mail_use_ssl: bool = True
    mail_from: str = "Bootcamp Admissions <no-reply@bootcamp.local>"
    mail_timeout_seconds: int = 30

    # Notification content
    frontend_url: str = "http://localhost:5173"
    review_period: str = "two weeks"
    next_cohort_date: str = "to be announced"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
