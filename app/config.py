"""IP Records Admin Backend — Configuration via pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database (no default: the process must not start without it)
    DATABASE_URL: str
    DB_NAME: Optional[str] = None

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60 * 24

    # ipinfo.io Lite
    IPINFO_TOKEN: str
    IPINFO_BASE_URL: str = "https://api.ipinfo.io/lite"
    GEO_TIMEOUT_SECONDS: float = 15.0
    GEO_RETRY_AFTER_SECONDS: int = 3600

    # HTTP
    CORS_ORIGINS: list[str] = ["*"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
