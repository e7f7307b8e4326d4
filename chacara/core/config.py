from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage: an empty DATABASE_URL keeps everything in the local JSON blob
    DATABASE_URL: str = ""
    LOCAL_STORE_PATH: str = "data/agenda.json"

    # Advice assistant (Gemini)
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    ADVICE_TIMEOUT_SECONDS: float = 30.0

    # Views
    UPCOMING_WINDOW_DAYS: int = 7
    RECENT_LOGS_LIMIT: int = 30

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def remote_store_configured(self) -> bool:
        return "://" in self.DATABASE_URL


settings = Settings()
