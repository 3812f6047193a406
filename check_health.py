import asyncio
import logging

from catapult_client.config.endpoint import ApiConfig
from catapult_client.config.settings import get_settings
from catapult_client.services.api import ApiClient

async def main():
    print("--- API Smoke Test ---")
    logging.basicConfig(level=logging.INFO)

    config = ApiConfig.from_settings(get_settings())
    print(f"Base URL: {config.base_url or '(same-origin)'}")
    api = ApiClient(config)

    # 1. Liveness
    print("\n1. Health check:")
    healthy = await api.check_health()
    print("SUCCESS: API is healthy." if healthy else "WARNING: Health check failed.")

    # 2. Реальный запрос через retry-цикл (только если сервер жив)
    if healthy:
        print("\n2. GET /api/events:")
        try:
            events = await api.get("/api/events", retries=1)
            count = len(events) if isinstance(events, list) else len(events.get("data") or [])
            print(f"SUCCESS: Got {count} events.")
        except Exception as e:
            print(f"FAILED: {e!r}")
    else:
        print("\n2. Request check SKIPPED (API is down)")

if __name__ == "__main__":
    asyncio.run(main())
