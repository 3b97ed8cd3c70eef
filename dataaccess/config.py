from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "DataAccess Sample"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = False

    # --- Database (SQLModel) ---
    DB_DRIVER: str = "sqlite"
    DB_NAME: str = "sample.db"
    DB_URL: Optional[str] = None  # Full URL; takes precedence over DB_DRIVER/DB_NAME
    DB_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return f"{self.DB_DRIVER}:///{self.DB_NAME}"

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False

    # --- Sample application ---
    SEED_SAMPLE_DATA: bool = True

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
