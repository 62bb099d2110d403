"""Tests for error classification utilities."""

import httpx
import pytest
from httpx import Response

from gitlab_client_core.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from gitlab_client_core.errors.handler import (
    error_for_response,
    error_for_transport_failure,
    raise_for_status,
    status_codes_hint,
)


@pytest.mark.unit
def test_success_response_is_not_an_error():
    assert error_for_response(Response(status_code=200)) is None
    assert error_for_response(Response(status_code=201)) is None
    assert error_for_response(Response(status_code=204)) is None


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    raise_for_status(Response(status_code=200))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (405, MethodNotAllowedError),
        (409, ConflictError),
        (422, UnprocessableEntityError),
        (429, RateLimitError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_status_code_mapping(status_code, exc_class):
    error = error_for_response(Response(status_code=status_code))

    assert type(error) is exc_class
    assert error.status_code == status_code


@pytest.mark.unit
def test_raise_for_status_raises_classified_error():
    response = Response(status_code=404, json={"message": "404 Project Not Found"})

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response, operation="GET /projects/42")

    assert exc_info.value.response == response
    assert "GET /projects/42 failed with HTTP 404: 404 Project Not Found" in str(exc_info.value)


@pytest.mark.unit
def test_gitlab_message_becomes_status_description():
    response = Response(status_code=401, json={"message": "401 Unauthorized"})

    error = error_for_response(response)

    assert error.status_description == "401 Unauthorized"
    assert error.payload is not None


@pytest.mark.unit
def test_reason_phrase_used_without_payload():
    error = error_for_response(Response(status_code=403))

    assert error.status_description == "403 Forbidden"
    assert error.payload is None


@pytest.mark.unit
def test_plain_text_body_is_included():
    response = Response(status_code=500, headers={"content-type": "text/plain"}, text="Internal Server Error")

    error = error_for_response(response)

    assert isinstance(error, ServerError)
    assert "500" in str(error)
    assert "Internal Server Error" in str(error)


@pytest.mark.unit
def test_hint_is_appended():
    hint = status_codes_hint("https://gitlab.example.com")

    error = error_for_response(Response(status_code=401), hint=hint)

    assert error.hint == hint
    assert str(error).endswith(hint)


@pytest.mark.unit
def test_rate_limit_retry_after():
    response = Response(status_code=429, headers={"retry-after": "60"}, text="Too many requests")

    error = error_for_response(response)

    assert isinstance(error, RateLimitError)
    assert error.retry_after == 60


@pytest.mark.unit
def test_rate_limit_invalid_retry_after():
    response = Response(status_code=429, headers={"retry-after": "soon"})

    assert error_for_response(response).retry_after is None


@pytest.mark.unit
def test_non_error_non_success_status():
    error = error_for_response(Response(status_code=304))

    assert type(error) is APIError


@pytest.mark.unit
@pytest.mark.parametrize(
    ("domain", "expected"),
    [
        ("https://gitlab.example.com", "https://gitlab.example.com/help/api/README.md#status-codes"),
        ("https://gitlab.example.com/", "https://gitlab.example.com/help/api/README.md#status-codes"),
        ("http://localhost:8080/gitlab", "http://localhost:8080/gitlab/help/api/README.md#status-codes"),
    ],
)
def test_status_codes_hint(domain, expected):
    assert expected in status_codes_hint(domain)


@pytest.mark.unit
def test_transport_failure():
    exc = httpx.ConnectError("Connection refused")

    error = error_for_transport_failure(exc, hint="see docs", operation="GET /projects")

    assert isinstance(error, TransportError)
    assert error.status_code is None
    assert error.response is None
    assert error.status_description == "Connection refused"
    assert error.__cause__ is exc
    assert "GET /projects failed: no response received (ConnectError: Connection refused)" in str(error)
    assert str(error).endswith("see docs")
