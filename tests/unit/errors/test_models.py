"""Tests for GitLab error payload models."""

import pytest
from httpx import Response

from gitlab_client_core.errors.models import ErrorPayload


@pytest.mark.unit
def test_parse_string_message():
    response = Response(status_code=401, json={"message": "401 Unauthorized"})

    payload = ErrorPayload.from_response(response)

    assert payload is not None
    assert payload.message == "401 Unauthorized"
    assert payload.describe() == "401 Unauthorized"


@pytest.mark.unit
def test_parse_field_messages():
    response = Response(
        status_code=400,
        json={"message": {"name": ["has already been taken"], "path": ["is too short", "is invalid"]}},
    )

    payload = ErrorPayload.from_response(response)

    assert payload is not None
    assert payload.describe() == "name: has already been taken; path: is too short, is invalid"


@pytest.mark.unit
def test_parse_list_message():
    response = Response(status_code=400, json={"message": ["first", "second"]})

    assert ErrorPayload.from_response(response).describe() == "first; second"


@pytest.mark.unit
def test_parse_oauth_error():
    response = Response(
        status_code=401,
        json={"error": "invalid_token", "error_description": "Token was revoked"},
    )

    payload = ErrorPayload.from_response(response)

    assert payload.error == "invalid_token"
    assert payload.describe() == "invalid_token - Token was revoked"


@pytest.mark.unit
def test_extensions_are_kept():
    response = Response(status_code=403, json={"message": "403 Forbidden", "request_id": "abc-123"})

    payload = ErrorPayload.from_response(response)

    assert payload.extensions == {"request_id": "abc-123"}


@pytest.mark.unit
def test_no_extensions_is_none():
    response = Response(status_code=404, json={"message": "404 Not Found"})

    assert ErrorPayload.from_response(response).extensions is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        Response(status_code=500, text="Internal Server Error"),
        Response(status_code=502),
        Response(status_code=400, json=["not", "an", "object"]),
        Response(status_code=400, json={"unrelated": "shape"}),
    ],
)
def test_non_gitlab_bodies_return_none(response):
    assert ErrorPayload.from_response(response) is None


@pytest.mark.unit
def test_empty_payload_description():
    assert ErrorPayload().describe() == "Unknown API error"
