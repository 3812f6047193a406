from typing import Dict, Mapping, Optional

# Базовые заголовки JSON API.
# Заголовки вызывающего кода перекрывают эти значения.
BASE_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def get_headers(extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Возвращает копию базовых заголовков, дополненную заголовками вызова"""
    headers = BASE_HEADERS.copy()
    if extra:
        # Имена заголовков регистронезависимы
        overridden = {name.lower() for name in extra}
        headers = {k: v for k, v in headers.items() if k.lower() not in overridden}
        headers.update(extra)
    return headers
