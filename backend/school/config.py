# school/config.py
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./school.db"

    # Server
    SERVER_PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Avatar Storage
    AVATARS_DIR: Path = Path("avatars")
    MAX_AVATAR_SIZE: int = 1024 * 1024  # 1MB, uploads of this size or larger are rejected

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
