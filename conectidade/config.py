from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://0.0.0.0:5000",
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ]

    # JWT Authentication
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Login sessions (memorystore defaults: one day, pruned daily)
    SESSION_TTL_SECONDS: int = 86400
    SESSION_CHECK_PERIOD_SECONDS: int = 86400

    # Storage: "memory" (reference store) or "sql" (DATABASE_URL)
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
