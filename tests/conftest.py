"""Shared fixtures for catapult_client tests."""

from typing import Callable, List

import httpx
import pytest

from catapult_client.config.endpoint import ApiConfig
from catapult_client.execution.executor import RequestExecutor
from catapult_client.execution.health import HealthProbe
from catapult_client.execution.http_client import HttpClientFactory
from catapult_client.services.api import ApiClient

BASE_URL = "http://api.example.com"


class SleepRecorder:
    """Stand-in for asyncio.sleep that records requested backoff delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(base_url=BASE_URL, retries=3, base_delay=1.0, health_timeout=5.0)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_client(config: ApiConfig, sleeper: SleepRecorder) -> Callable[..., ApiClient]:
    """Build an ApiClient whose wire is an httpx.MockTransport handler."""

    def _make(handler, cfg: ApiConfig = None) -> ApiClient:
        cfg = cfg or config
        factory = HttpClientFactory(cfg, transport=httpx.MockTransport(handler))
        executor = RequestExecutor(cfg, health_probe=HealthProbe(factory), sleep=sleeper)
        return ApiClient(cfg, factory=factory, executor=executor)

    return _make


def make_response(status_code: int, text: str = "") -> httpx.Response:
    req = httpx.Request("GET", f"{BASE_URL}/api/test")
    return httpx.Response(status_code, text=text, request=req)
