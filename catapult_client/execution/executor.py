import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_incrementing,
)

from catapult_client.config.endpoint import ApiConfig
from catapult_client.core.exceptions import ExhaustedRetries
from catapult_client.execution.classifier import (
    classify_httpx_error,
    is_retryable,
)
from catapult_client.execution.decoder import decode_body
from catapult_client.execution.health import HealthProbe

logger = logging.getLogger(__name__)

RequestFunc = Callable[[], Awaitable[httpx.Response]]
SleepFunc = Callable[[float], Awaitable[None]]


class RequestExecutor:
    """
    Цикл попыток для одного запроса.

    - 4xx: ошибка сразу уходит вызывающему коду, без повторов.
    - 5xx и сетевые сбои: повтор, пока есть бюджет.
    - Пауза между попытками растет ЛИНЕЙНО: base_delay * (i + 1).
    - Health Probe вызывается перед паузой только для диагностики.
    """

    def __init__(
        self,
        config: ApiConfig,
        health_probe: Optional[HealthProbe] = None,
        sleep: SleepFunc = asyncio.sleep,
        log: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.health_probe = health_probe
        self._sleep_func = sleep
        self.logger = log or logger

    async def _backoff(self, delay: float) -> None:
        # Результат проверки не влияет ни на паузу, ни на число попыток
        if self.health_probe is not None:
            try:
                healthy = await self.health_probe.check()
            except Exception as e:
                # CancelledError (BaseException) не перехватывается
                self.logger.warning(f"Health check could not run: {e!r}")
                healthy = False
            if not healthy:
                self.logger.warning("Server health check failed, waiting before retry...")
        await self._sleep_func(delay)

    async def _attempt(self, request_func: RequestFunc) -> Any:
        try:
            response = await request_func()
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise classify_httpx_error(e) from e

        return decode_body(response.text)

    async def execute(self, request_func: RequestFunc, retries: Optional[int] = None) -> Any:
        """
        Выполняет запрос с политикой Resilience.
        Возвращает декодированное JSON-тело ответа.
        """
        if retries is None:
            retries = self.config.retries
        base_delay = self.config.base_delay

        retrier = AsyncRetrying(
            retry=retry_if_exception(is_retryable),
            stop=stop_after_attempt(retries + 1),
            wait=wait_incrementing(start=base_delay, increment=base_delay),
            sleep=self._backoff,
            before_sleep=before_sleep_log(self.logger, logging.WARNING),
        )

        try:
            async for attempt in retrier:
                with attempt:
                    return await self._attempt(request_func)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            attempts = e.last_attempt.attempt_number
            self.logger.error(f"All API request attempts failed ({attempts}): {last_error!r}")
            raise ExhaustedRetries(attempts, last_error) from last_error
