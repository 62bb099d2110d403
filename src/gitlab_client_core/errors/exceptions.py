"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from gitlab_client_core.errors.models import ErrorPayload


class APIError(Exception):
    """Base exception for API errors.

    ``str(error)`` is the message followed by the documentation hint, so a
    logged error is enough to diagnose the failure without the source.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        payload: "ErrorPayload | None" = None,
        status_description: str | None = None,
        hint: str | None = None,
    ):
        super().__init__(f"{message}\n{hint}" if hint else message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.payload = payload
        self.status_description = status_description
        self.hint = hint


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class MethodNotAllowedError(ClientError):
    """405 Method Not Allowed."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class TransportError(APIError):
    """The request never produced a response (DNS, connection, TLS, timeout)."""

    pass


class ResponseDecodeError(APIError):
    """A successful response whose body is not valid JSON."""

    pass
