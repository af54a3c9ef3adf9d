from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Hosted Postgres (the backend service owns the schema)
    DATABASE_URL: str

    # Access tokens are issued by the hosted auth provider; we only verify them
    AUTH_JWT_SECRET: str
    AUTH_JWT_ALGORITHM: str = "HS256"
    AUTH_JWT_AUDIENCE: str = "authenticated"

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Matching
    MATCH_RESULT_LIMIT: int = 12
    STRICT_MATCH_RESULT_LIMIT: int = 12

    # Rewards
    SWAP_COMPLETION_REWARD: int = 10
    LEADERBOARD_SIZE: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
