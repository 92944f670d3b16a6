"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]

DEFAULT_JWT_SECRET = "change-me"


class Settings(BaseSettings):
    APP_NAME: str = "findw"
    ENV: str = "development"

    DATABASE_URL: str = "postgresql+psycopg://postgres@localhost:5432/findw"
    DB_ECHO: bool = False

    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    # Lifetime of access tokens minted by /auth/refresh; unset means the canonical value above.
    REFRESH_ACCESS_TOKEN_EXPIRE_MINUTES: int | None = None
    REFRESH_TOKEN_EXPIRE_DAYS: int = 30
    REFRESH_TOKEN_BYTES: int = 32

    PASSWORD_HASH_TIME_COST: int = 3
    PASSWORD_HASH_MEMORY_COST_KIB: int = 65536
    PASSWORD_HASH_PARALLELISM: int = 4

    VK_TOKEN_ENC_KEY: str = ""

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000"

    PAGE_DEFAULT_LIMIT: int = 50
    PAGE_MAX_LIMIT: int = 100
    DEFAULT_SEARCH_INTERVAL_MINUTES: int = 60
    MIN_SEARCH_INTERVAL_MINUTES: int = 30

    model_config = SettingsConfigDict(env_file=str(BASE_DIR / ".env"), env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENV.strip().lower() in {"production", "prod"}

    @property
    def refresh_access_token_minutes(self) -> int:
        return self.REFRESH_ACCESS_TOKEN_EXPIRE_MINUTES or self.ACCESS_TOKEN_EXPIRE_MINUTES

    def validate_runtime_security(self) -> None:
        if self.REFRESH_TOKEN_BYTES < 32:
            raise ValueError("REFRESH_TOKEN_BYTES must be at least 32")
        if self.ACCESS_TOKEN_EXPIRE_MINUTES <= 0 or self.REFRESH_TOKEN_EXPIRE_DAYS <= 0:
            raise ValueError("token lifetimes must be positive")
        if not self.is_production:
            return
        if not self.JWT_SECRET.strip() or self.JWT_SECRET == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set in production")
        if not self.VK_TOKEN_ENC_KEY.strip():
            raise ValueError("VK_TOKEN_ENC_KEY must be set in production")


def get_settings() -> Settings:
    return Settings()
