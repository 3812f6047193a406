from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Basic Info ---
    APP_NAME: str = "Catapult API Client"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # --- Base Endpoint ---
    # Явный адрес API имеет наивысший приоритет.
    API_URL: Optional[str] = None
    # Адрес страницы, с которой работает фронтенд (аналог window.location).
    PAGE_URL: Optional[str] = None
    PRODUCTION: bool = False

    # Эвристика client -> server для деплоя на общем хостинге
    FRONTEND_HOST_MARKER: str = "catapult-event-manager-client"
    FRONTEND_HOST_TOKEN: str = "-client"
    BACKEND_HOST_TOKEN: str = "-server"

    DEV_API_URL: str = "http://localhost:3001"

    # --- HTTP Client Configuration ---
    # None = ждать ответа без ограничения.
    REQUEST_TIMEOUT: Optional[float] = 30.0

    # --- Retry Policy Configuration ---
    RETRY_MAX_RETRIES: int = 3
    RETRY_BASE_DELAY: float = 1.0

    # --- Health Probe ---
    HEALTH_PATH: str = "/api/health"
    HEALTH_TIMEOUT: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
