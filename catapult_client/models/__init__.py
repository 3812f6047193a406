from catapult_client.models.request import DEFAULT_RETRIES, HttpMethod, RequestDescriptor

__all__ = [
    "DEFAULT_RETRIES",
    "HttpMethod",
    "RequestDescriptor",
]
