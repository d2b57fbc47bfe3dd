from typing import Optional
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Generic CRUD Service"
    APP_DESCRIPTION: str = "Generic CRUD endpoints and clients over pluggable repositories"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True
    SECRET_KEY: str = "your-super-secret-key-change-it-in-production"

    # --- Database (SQLModel, async driver) ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = "root"
    DB_NAME: str = "app_db"
    DB_URL: Optional[str] = None  # Full URL override, e.g. sqlite+aiosqlite:///./app.db
    DB_AUTO_CREATE: bool = False  # Create tables on startup (no migrations)

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        # Build async MySQL connection URL
        safe_password = quote_plus(self.DB_PASSWORD)
        return f"mysql+aiomysql://{self.DB_USER}:{safe_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # --- API ---
    API_ROOT: str = "api/v1"
    OPERATION_TIMEOUT_SECONDS: Optional[float] = None  # Deadline for each repository/commit call

    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # --- Outbound client ---
    SERVER_PROTOCOL: str = "http"
    SERVER_ADDRESS: str = "localhost"
    SERVER_PORT: str = "8000"
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # --- Logging ---
    LOG_DIR: str = "logs"

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
