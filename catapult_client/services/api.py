import json
import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from catapult_client.config.endpoint import ApiConfig
from catapult_client.config.headers import get_headers
from catapult_client.execution.executor import RequestExecutor
from catapult_client.execution.health import HealthProbe
from catapult_client.execution.http_client import HttpClientFactory
from catapult_client.models.request import HttpMethod, RequestDescriptor

logger = logging.getLogger(__name__)


def _serialize(data: Any) -> Optional[str]:
    return json.dumps(data) if data is not None else None


class ApiClient:
    """
    Тонкий фасад: один метод на HTTP-глагол.
    Заголовки и сериализация тела здесь, retry-логика в RequestExecutor.
    """

    def __init__(
        self,
        config: ApiConfig,
        factory: Optional[HttpClientFactory] = None,
        executor: Optional[RequestExecutor] = None,
    ):
        self.config = config
        self.factory = factory or HttpClientFactory(config)
        self.health_probe = HealthProbe(self.factory)
        self.executor = executor or RequestExecutor(config, health_probe=self.health_probe)

    async def request(self, descriptor: RequestDescriptor) -> Any:
        url = self.config.build_url(descriptor.path)
        headers = get_headers(descriptor.headers)

        async def send() -> httpx.Response:
            async with self.factory.client() as client:
                return await client.request(
                    descriptor.method.value,
                    url,
                    headers=headers,
                    content=descriptor.body,
                    params=descriptor.params,
                )

        logger.debug(f"{descriptor.method.value} {url} (retries={descriptor.retries})")
        return await self.executor.execute(send, retries=descriptor.retries)

    def _descriptor(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        retries: Optional[int] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            path=path,
            headers=headers or {},
            body=body,
            retries=self.config.retries if retries is None else retries,
            params=params,
        )

    async def get(self, path: str, **options) -> Any:
        return await self.request(self._descriptor(HttpMethod.GET, path, **options))

    async def post(self, path: str, data: Any = None, **options) -> Any:
        return await self.request(self._descriptor(HttpMethod.POST, path, _serialize(data), **options))

    async def put(self, path: str, data: Any = None, **options) -> Any:
        return await self.request(self._descriptor(HttpMethod.PUT, path, _serialize(data), **options))

    async def patch(self, path: str, data: Any = None, **options) -> Any:
        return await self.request(self._descriptor(HttpMethod.PATCH, path, _serialize(data), **options))

    async def delete(self, path: str, **options) -> Any:
        return await self.request(self._descriptor(HttpMethod.DELETE, path, **options))

    async def check_health(self) -> bool:
        return await self.health_probe.check()

    # --- Event-specific methods ---

    async def get_event_contacts(self, event_id: str) -> List[Dict[str, Any]]:
        response = await self.get("/api/contacts", params={"eventId": event_id})
        if isinstance(response, dict):
            return response.get("data") or []
        return []
