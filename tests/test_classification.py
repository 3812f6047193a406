"""Tests for error classification, response decoding and the request model."""

import httpx
import pytest

from catapult_client.core.exceptions import (
    ApiError,
    ClientError,
    ConfigurationError,
    ExhaustedRetries,
    ResponseDecodeError,
    ServerError,
    TransportFailure,
)
from catapult_client.execution.classifier import (
    classify_httpx_error,
    error_for_status,
    is_retryable,
)
from catapult_client.execution.decoder import decode_body, decode_error_body, error_message
from catapult_client.models.request import HttpMethod, RequestDescriptor


class TestClassifier:

    @pytest.mark.parametrize("status", [400, 404, 422, 499])
    def test_client_statuses_are_terminal(self, status):
        error = error_for_status(status, "nope")
        assert isinstance(error, ClientError)
        assert not is_retryable(error)

    @pytest.mark.parametrize("status", [500, 502, 503, 504, 599])
    def test_server_statuses_are_retryable(self, status):
        error = error_for_status(status, "down")
        assert isinstance(error, ServerError)
        assert is_retryable(error)

    def test_other_non_success_statuses_are_retryable(self):
        # No override table: anything outside [400, 500) is retried
        assert is_retryable(error_for_status(304, "not modified"))

    def test_transport_failure_is_retryable(self):
        error = TransportFailure("refused")
        assert error.status is None
        assert is_retryable(error)

    def test_non_api_errors_are_not_retried(self):
        assert not is_retryable(ConfigurationError("no origin"))
        assert not is_retryable(KeyError("x"))

    def test_httpx_request_errors_map_to_transport_failure(self):
        request = httpx.Request("GET", "http://x")
        for exc in (
            httpx.ConnectError("refused", request=request),
            httpx.ReadTimeout("slow", request=request),
            httpx.RemoteProtocolError("reset", request=request),
        ):
            error = classify_httpx_error(exc)
            assert isinstance(error, TransportFailure)
            assert error.status is None

    def test_httpx_status_error_maps_by_status(self):
        request = httpx.Request("GET", "http://x")
        response = httpx.Response(404, request=request)
        exc = httpx.HTTPStatusError("not found", request=request, response=response)

        error = classify_httpx_error(exc)

        assert isinstance(error, ClientError)
        assert error.message == "HTTP 404: Not Found"
        assert error.data == {}

    def test_httpx_status_error_carries_error_payload(self):
        request = httpx.Request("POST", "http://x")
        response = httpx.Response(503, json={"error": "Database unavailable"}, request=request)
        exc = httpx.HTTPStatusError("unavailable", request=request, response=response)

        error = classify_httpx_error(exc)

        assert isinstance(error, ServerError)
        assert error.message == "Database unavailable"
        assert error.data == {"error": "Database unavailable"}
        assert is_retryable(error)


class TestDecoder:

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_body_is_empty_structure(self, text):
        assert decode_body(text) == {}

    def test_json_body(self):
        assert decode_body('{"ok": true}') == {"ok": True}
        assert decode_body("[1, 2, 3]") == [1, 2, 3]

    def test_malformed_success_body_raises(self):
        with pytest.raises(ResponseDecodeError):
            decode_body("{not json")

    def test_malformed_error_body_degrades(self):
        assert decode_error_body("<h1>502 Bad Gateway</h1>") == {}

    def test_error_message_prefers_server_error_field(self):
        response = httpx.Response(400)
        assert error_message(response, {"error": "Email is required"}) == "Email is required"
        assert error_message(response, {}) == "HTTP 400: Bad Request"
        assert error_message(response, ["not", "a", "dict"]) == "HTTP 400: Bad Request"


class TestErrors:

    def test_api_error_defaults(self):
        error = ApiError(500, "boom")
        assert error.data == {}
        assert str(error) == "boom"

    def test_exhausted_retries_wraps_last_error(self):
        last = ServerError(503, "HTTP 503: Service Unavailable", {"retry": True})
        error = ExhaustedRetries(4, last)

        assert error.attempts == 4
        assert error.last_error is last
        assert error.status == 503
        assert error.data == {"retry": True}
        assert "after 4 attempts" in str(error)


class TestRequestDescriptor:

    def test_defaults(self):
        descriptor = RequestDescriptor(method=HttpMethod.GET, path="/api/events")
        assert descriptor.retries == 3
        assert descriptor.max_attempts == 4
        assert descriptor.headers == {}
        assert descriptor.body is None

    def test_string_method_is_normalized(self):
        assert RequestDescriptor(method="delete", path="/x").method is HttpMethod.DELETE

    def test_unknown_method_rejected(self):
        with pytest.raises(ValueError):
            RequestDescriptor(method="TRACE", path="/x")

    def test_negative_retries_rejected(self):
        with pytest.raises(ValueError):
            RequestDescriptor(method="GET", path="/x", retries=-1)

    def test_is_frozen(self):
        descriptor = RequestDescriptor(method="GET", path="/x")
        with pytest.raises(AttributeError):
            descriptor.path = "/y"
