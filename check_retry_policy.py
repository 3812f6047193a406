import asyncio
import httpx
from unittest.mock import AsyncMock

from catapult_client.config.endpoint import ApiConfig
from catapult_client.execution.executor import RequestExecutor
from catapult_client.core.exceptions import ClientError, ExhaustedRetries

# --- Mocks ---
# Минимальная пауза, чтобы смоук шел быстро
settings = ApiConfig(base_url="https://example.com", retries=3, base_delay=0.01)

# Helper для создания response
def make_response(status_code: int, text: str = ""):
    req = httpx.Request("GET", "https://example.com")
    return httpx.Response(status_code, text=text, request=req)

async def test_server_error_exhausts_budget():
    print("\n--- Test 1: 503 on every attempt -> ExhaustedRetries ---")
    executor = RequestExecutor(settings)

    mock_func = AsyncMock(return_value=make_response(503))

    try:
        await executor.execute(mock_func)
        print("FAILED: Should have raised ExhaustedRetries")
    except ExhaustedRetries as e:
        print(f"Call count: {mock_func.call_count}, attempts: {e.attempts}")
        if mock_func.call_count == 4 and e.attempts == 4:
            print("SUCCESS: 4 attempts made (retries=3).")
        else:
            print(f"FAILED: Expected 4 calls, got {mock_func.call_count}")

async def test_not_found_fail_fast():
    print("\n--- Test 2: 404 -> Fail Fast (ClientError) ---")
    executor = RequestExecutor(settings)

    mock_func = AsyncMock(return_value=make_response(404))

    try:
        await executor.execute(mock_func)
        print("FAILED: Should have raised ClientError")
    except ClientError as e:
        print(f"SUCCESS: Caught ClientError {e.status}. Call count: {mock_func.call_count}")
        if mock_func.call_count == 1:
            print("Verified: Strictly 1 attempt (No retry on 4xx).")
        else:
            print(f"FAILED: Executed {mock_func.call_count} times! Should be 1.")

async def test_connection_refused_then_ok():
    print("\n--- Test 3: Connection refused -> Retry -> 200 ---")
    executor = RequestExecutor(settings)

    mock_func = AsyncMock()
    mock_func.side_effect = [
        httpx.ConnectError("Connection refused", request=httpx.Request("GET", "x")),
        make_response(200, '{"ok": true}'),
    ]

    result = await executor.execute(mock_func)

    print(f"Call count: {mock_func.call_count}, result: {result}")
    if mock_func.call_count == 2 and result == {"ok": True}:
        print("SUCCESS: Transport failure retried once, then succeeded.")
    else:
        print(f"FAILED: Expected 2 calls, got {mock_func.call_count}")

async def test_empty_body():
    print("\n--- Test 4: 200 with empty body -> {} ---")
    executor = RequestExecutor(settings)

    result = await executor.execute(AsyncMock(return_value=make_response(200)))

    if result == {}:
        print("SUCCESS: Empty body decoded to {}.")
    else:
        print(f"FAILED: Got {result!r}")

async def main():
    await test_server_error_exhausts_budget()
    await test_not_found_fail_fast()
    await test_connection_refused_then_ok()
    await test_empty_body()

if __name__ == "__main__":
    asyncio.run(main())
