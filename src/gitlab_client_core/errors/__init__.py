"""Error classification for GitLab API calls."""

from gitlab_client_core.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
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
from gitlab_client_core.errors.models import ErrorPayload

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorPayload",
    "ForbiddenError",
    "MethodNotAllowedError",
    "NotFoundError",
    "RateLimitError",
    "ResponseDecodeError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "error_for_response",
    "error_for_transport_failure",
    "raise_for_status",
    "status_codes_hint",
]
