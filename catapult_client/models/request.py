from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

DEFAULT_RETRIES = 3


class HttpMethod(str, Enum):
    """Поддерживаемые HTTP-методы"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Описание одного логического запроса.
    Не меняется в течение цикла попыток.
    """
    method: HttpMethod
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    retries: int = DEFAULT_RETRIES
    params: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        # Нормализация строкового метода ("get" -> HttpMethod.GET)
        if not isinstance(self.method, HttpMethod):
            object.__setattr__(self, "method", HttpMethod(self.method.upper()))
        if self.retries < 0:
            raise ValueError(f"retries must be non-negative, got {self.retries}")
        object.__setattr__(self, "headers", dict(self.headers or {}))

    @property
    def max_attempts(self) -> int:
        return self.retries + 1
