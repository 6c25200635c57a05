# src/employee_api/config.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",            # auto-load .env (optional; process env wins)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_TITLE: str = "employee-api"
    APP_VERSION: str = "1.0"
    API_PREFIX: str = ""               # e.g. "/api" -> /api/employees

    # Database (async driver required: aiosqlite / asyncpg)
    DATABASE_URL: str = "sqlite+aiosqlite:///./employees.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_TIMEOUT: int = 30               # seconds
    DB_CREATE_ALL: bool = True         # create tables on startup

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # HTTP
    CORS_ORIGINS: str = "*"            # comma-separated list
    SECURITY_HEADERS: bool = True

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
