from typing import Any, Optional


class AppBaseError(Exception):
    """Базовый класс ошибок."""
    pass

class ConfigurationError(AppBaseError):
    """Невозможно построить адрес запроса из текущей конфигурации."""
    pass

class ApiError(AppBaseError):
    """
    Ошибка обращения к API.
    status = None, если ответ не был получен вовсе.
    """
    def __init__(self, status: Optional[int], message: str, data: Any = None):
        self.status = status
        self.message = message
        self.data = data if data is not None else {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self.status!r}, message={self.message!r})"

class ClientError(ApiError):
    """
    4xx (400, 401, 404, 422...).
    Ошибка вызывающей стороны. Retry НЕ выполняется.
    """
    pass

class ServerError(ApiError):
    """
    5xx. Временный сбой сервиса.
    Executor выполнит Retry.
    """
    pass

class TransportFailure(ApiError):
    """
    Ответ не получен (Connection refused, DNS, Timeout).
    Для бюджета ретраев эквивалентна ServerError.
    """
    def __init__(self, message: str, data: Any = None):
        super().__init__(None, message, data)

class ResponseDecodeError(TransportFailure):
    """Успешный статус, но тело ответа не является JSON."""
    pass

class ExhaustedRetries(ApiError):
    """
    Бюджет попыток исчерпан на ретраибельной ошибке.
    Оборачивает последнюю ошибку (last_error, __cause__).
    """
    def __init__(self, attempts: int, last_error: Optional[ApiError]):
        self.attempts = attempts
        self.last_error = last_error
        status = last_error.status if last_error is not None else None
        data = last_error.data if last_error is not None else None
        super().__init__(
            status,
            f"Failed to connect to server after {attempts} attempts. "
            f"Please check if the server is running.",
            data,
        )
