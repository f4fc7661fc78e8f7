"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the chat backend."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    DATABASE_URL: Optional[str] = None

    CHAT_DB_HOST: str = "localhost"
    CHAT_DB_PORT: int = 3306
    CHAT_DB_NAME: str = "chatdb"
    CHAT_DB_USER: str = "root"
    CHAT_DB_PASSWORD: str = ""
    CHAT_DB_CHARSET: str = "utf8mb4"

    DB_POOL_SIZE: int = 5
    DB_POOL_TIMEOUT_SECONDS: int = 30
    DB_STATEMENT_TIMEOUT_SECONDS: int = 10

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 9999
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    def sqlalchemy_url(self) -> str:
        """Return the SQLAlchemy URL, preferring DATABASE_URL over the CHAT_DB_* parts."""
        if self.DATABASE_URL:
            url = self.DATABASE_URL
            # bare mysql:// would select mysqlclient; we ship pymysql
            if url.startswith("mysql://"):
                url = "mysql+pymysql://" + url[len("mysql://"):]
            return url
        return (
            f"mysql+pymysql://{self.CHAT_DB_USER}:{self.CHAT_DB_PASSWORD}"
            f"@{self.CHAT_DB_HOST}:{self.CHAT_DB_PORT}/{self.CHAT_DB_NAME}"
            f"?charset={self.CHAT_DB_CHARSET}"
        )

    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()
