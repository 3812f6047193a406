import logging

from catapult_client.config.endpoint import ApiConfig, resolve_base_url
from catapult_client.config.settings import Settings, get_settings
from catapult_client.core.exceptions import (
    ApiError,
    AppBaseError,
    ClientError,
    ConfigurationError,
    ExhaustedRetries,
    ResponseDecodeError,
    ServerError,
    TransportFailure,
)
from catapult_client.models import HttpMethod, RequestDescriptor
from catapult_client.services.api import ApiClient

# Библиотека молчит, пока приложение не настроит logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiError",
    "AppBaseError",
    "ClientError",
    "ConfigurationError",
    "ExhaustedRetries",
    "HttpMethod",
    "RequestDescriptor",
    "ResponseDecodeError",
    "ServerError",
    "Settings",
    "TransportFailure",
    "get_settings",
    "resolve_base_url",
]
