import httpx

from catapult_client.core.exceptions import (
    ApiError,
    ClientError,
    ServerError,
    TransportFailure,
)
from catapult_client.execution.decoder import decode_error_body, error_message


def is_terminal_status(status) -> bool:
    """4xx - ошибка вызывающей стороны, повторять бессмысленно."""
    return status is not None and 400 <= status < 500


def is_retryable(error: BaseException) -> bool:
    """
    Классификатор ошибок. Определяет стратегию Retry vs Fail Fast.

    Разделение бинарное и не зависит от конкретного кода:
    - статус в [400, 500) -> terminal;
    - нет статуса (транспорт) или статус >= 500 -> retry.
    """
    if not isinstance(error, ApiError):
        return False
    return not is_terminal_status(error.status)


def error_for_status(status: int, message: str, data=None) -> ApiError:
    if is_terminal_status(status):
        return ClientError(status, message, data)
    return ServerError(status, message, data)


def classify_httpx_error(e: Exception) -> ApiError:
    """Переводит исключения httpx в таксономию ApiError."""
    # 1. Ошибки статуса (ответ получен)
    # Тело ошибки разбирается best-effort, сбой разбора дает {}
    if isinstance(e, httpx.HTTPStatusError):
        response = e.response
        data = decode_error_body(response.text)
        return error_for_status(response.status_code, error_message(response, data), data)

    # 2. Таймаут, DNS, Connection refused, обрыв соединения -> ответа нет
    if isinstance(e, httpx.TimeoutException):
        return TransportFailure(f"Timeout: {e}")
    if isinstance(e, httpx.RequestError):
        return TransportFailure(f"Network error ({e.__class__.__name__}): {e}")

    return TransportFailure(f"Unknown transport failure: {e!r}")
