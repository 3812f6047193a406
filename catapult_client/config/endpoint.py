"""
Конфигурация базового адреса API.

Адрес вычисляется ОДИН раз при создании ApiConfig и дальше не меняется:
все запросы сессии идут на один и тот же backend.
"""
import logging
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from catapult_client.config.settings import Settings
from catapult_client.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _page_origin(page_url: Optional[str]) -> Optional[str]:
    if not page_url:
        return None
    parsed = urlparse(page_url)
    if not parsed.scheme or not parsed.netloc:
        return None
    return f"{parsed.scheme}://{parsed.netloc}"


def _backend_from_hostname(settings: Settings) -> Optional[str]:
    """Фронтенд `*-client` -> backend `*-server` на том же хостинге."""
    if not settings.PAGE_URL:
        return None
    hostname = urlparse(settings.PAGE_URL).hostname or ""
    if settings.FRONTEND_HOST_MARKER not in hostname:
        return None
    backend_host = hostname.replace(
        settings.FRONTEND_HOST_TOKEN, settings.BACKEND_HOST_TOKEN, 1
    )
    return f"https://{backend_host}"


def resolve_base_url(settings: Settings) -> str:
    """
    Порядок разрешения:
    1. Явный API_URL.
    2. Эвристика по имени хоста страницы.
    3. Same-origin ("") в production.
    4. Адрес локальной разработки.
    """
    if settings.API_URL:
        return settings.API_URL.rstrip("/")

    rewritten = _backend_from_hostname(settings)
    if rewritten:
        return rewritten

    if settings.PRODUCTION:
        return ""

    return settings.DEV_API_URL.rstrip("/")


class ApiConfig(BaseModel):
    """Неизменяемая конфигурация клиента. Передается каждому ApiClient явно."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Базовый адрес API; '' = same-origin")
    origin: Optional[str] = Field(None, description="Origin страницы для same-origin запросов")

    retries: int = Field(3, ge=0)
    base_delay: float = Field(1.0, ge=0)
    request_timeout: Optional[float] = Field(30.0, gt=0)

    health_path: str = "/api/health"
    health_timeout: float = Field(5.0, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiConfig":
        base_url = resolve_base_url(settings)
        logger.debug(f"Resolved API base URL: {base_url!r}")
        return cls(
            base_url=base_url,
            origin=_page_origin(settings.PAGE_URL),
            retries=settings.RETRY_MAX_RETRIES,
            base_delay=settings.RETRY_BASE_DELAY,
            request_timeout=settings.REQUEST_TIMEOUT,
            health_path=settings.HEALTH_PATH,
            health_timeout=settings.HEALTH_TIMEOUT,
        )

    def build_url(self, path: str) -> str:
        # Абсолютные адреса идут как есть
        if path.startswith("http"):
            return path
        if self.base_url:
            return f"{self.base_url}{path}"
        if self.origin:
            return f"{self.origin}{path}"
        raise ConfigurationError(
            f"Cannot build URL for {path!r}: same-origin base without a page origin"
        )

    @property
    def health_url(self) -> str:
        return self.build_url(self.health_path)
