"""Error classification for HTTP responses and transport failures."""

import httpx

from gitlab_client_core.config import STATUS_CODES_DOC_PATH
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
from gitlab_client_core.errors.models import ErrorPayload

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def status_codes_hint(domain: str) -> str:
    """Point at the status-code reference served by the GitLab instance itself."""
    return f"See {domain.rstrip('/')}{STATUS_CODES_DOC_PATH} for the meaning of API status codes."


def _parse_retry_after(response: httpx.Response) -> int | None:
    if "retry-after" not in response.headers:
        return None
    try:
        return int(response.headers["retry-after"])
    except (ValueError, TypeError):
        return None


def error_for_response(
    response: httpx.Response,
    *,
    hint: str | None = None,
    operation: str | None = None,
) -> APIError | None:
    """Classify an HTTP response.

    Args:
        response: HTTP response object
        hint: Documentation pointer appended to the error message
        operation: Label such as ``"GET /projects"`` for the error message

    Returns:
        None for 2xx responses, otherwise the matching APIError subclass
        (not raised)
    """
    if response.is_success:
        return None

    status_code = response.status_code

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    payload = ErrorPayload.from_response(response)
    if payload:
        status_description = payload.describe()
    else:
        reason = response.reason_phrase
        status_description = f"{status_code} {reason}" if reason else str(status_code)

    prefix = f"{operation} failed" if operation else "Request failed"
    message = f"{prefix} with HTTP {status_code}: {status_description}"

    if not payload:
        # Surface the start of a non-JSON body, e.g. an HTML error page
        response_text = response.text[:200].strip()
        if response_text:
            message = f"{message} ({response_text})"

    kwargs = {
        "status_code": status_code,
        "response": response,
        "payload": payload,
        "status_description": status_description,
        "hint": hint,
    }
    if exc_class is RateLimitError:
        return RateLimitError(message, retry_after=_parse_retry_after(response), **kwargs)
    return exc_class(message, **kwargs)


def raise_for_status(
    response: httpx.Response,
    *,
    hint: str | None = None,
    operation: str | None = None,
) -> None:
    """Raise the appropriate APIError subclass for non-2xx responses.

    Raises:
        APIError subclass based on status code
    """
    error = error_for_response(response, hint=hint, operation=operation)
    if error is not None:
        raise error


def error_for_transport_failure(
    exc: Exception,
    *,
    hint: str | None = None,
    operation: str | None = None,
) -> TransportError:
    """Wrap an httpx transport exception as a TransportError."""
    prefix = f"{operation} failed" if operation else "Request failed"
    description = str(exc) or type(exc).__name__
    error = TransportError(
        f"{prefix}: no response received ({type(exc).__name__}: {description})",
        status_description=description,
        hint=hint,
    )
    error.__cause__ = exc
    return error
