import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx

from catapult_client.config.endpoint import ApiConfig
from catapult_client.config.headers import get_headers

logger = logging.getLogger(__name__)

class HttpClientFactory:
    """
    Фабрика HTTP-клиентов.
    Хранит общий cookie jar: сессионные cookies переживают отдельные запросы
    (аналог credentials: 'include' в браузере).
    """

    def __init__(self, config: ApiConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        # transport подменяется в тестах (httpx.MockTransport)
        self._transport = transport
        self.cookies = httpx.Cookies()

    def _timeout(self, seconds: Optional[float]) -> httpx.Timeout:
        # Timeout(None) = без ограничения
        return httpx.Timeout(seconds)

    @asynccontextmanager
    async def client(self, timeout: Optional[float] = None) -> AsyncGenerator[httpx.AsyncClient, None]:
        """
        Создает контекст с настроенным клиентом.
        timeout по умолчанию берется из конфигурации (REQUEST_TIMEOUT).
        """
        effective_timeout = self.config.request_timeout if timeout is None else timeout
        logger.debug(f"Opening HTTP client (timeout={effective_timeout})")

        async with httpx.AsyncClient(
            headers=get_headers(),
            cookies=self.cookies,
            timeout=self._timeout(effective_timeout),
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            yield client
            # Сохраняем cookies, выставленные сервером
            self.cookies.update(client.cookies)
