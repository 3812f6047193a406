import json
from typing import Any

import httpx

from catapult_client.core.exceptions import ResponseDecodeError


def decode_body(text: str) -> Any:
    """
    Пустое тело -> {}.
    Иначе JSON; ошибка разбора пробрасывается как ResponseDecodeError.
    """
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text)
    except ValueError as e:
        raise ResponseDecodeError(f"Malformed JSON in response body: {e}") from e


def decode_error_body(text: str) -> Any:
    """
    Best-effort разбор тела ошибки.
    Никогда не подменяет исходную ошибку: при любой проблеме возвращает {}.
    """
    try:
        return decode_body(text)
    except ResponseDecodeError:
        return {}


def error_message(response: httpx.Response, data: Any) -> str:
    """Сообщение сервера (`error`) или `HTTP <status>: <reason>`."""
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return f"HTTP {response.status_code}: {response.reason_phrase}"
