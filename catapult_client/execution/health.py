"""
Проверка живости удаленного API.

Результат носит справочный характер: пишется в лог вокруг ретраев
и никогда не меняет бюджет попыток RequestExecutor.
"""

import asyncio
import logging

import httpx

from catapult_client.execution.http_client import HttpClientFactory

logger = logging.getLogger(__name__)


class HealthProbe:
    def __init__(self, factory: HttpClientFactory):
        self.factory = factory

    @property
    def deadline(self) -> float:
        return self.factory.config.health_timeout

    async def check(self) -> bool:
        """GET {base}/api/health с жестким дедлайном.

        Returns:
            True только для 2xx, полученного до дедлайна.
            Timeout, отмена или сетевой сбой -> False.
        """
        url = self.factory.config.health_url
        try:
            response = await asyncio.wait_for(self._get(url), timeout=self.deadline)
        except asyncio.TimeoutError:
            logger.warning(f"Health check timed out after {self.deadline}s: {url}")
            return False
        except httpx.HTTPError as e:
            logger.warning(f"Health check failed ({e.__class__.__name__}): {url}")
            return False

        if not response.is_success:
            logger.warning(f"Health check returned HTTP {response.status_code}: {url}")
            return False
        return True

    async def _get(self, url: str) -> httpx.Response:
        async with self.factory.client(timeout=self.deadline) as client:
            return await client.get(url)
