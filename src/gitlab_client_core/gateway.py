"""Authenticated dispatch of request descriptors.

The gateway is the only component that knows about the domain, the API
version prefix and the PRIVATE-TOKEN header. Resource code hands it a
`RequestDescriptor` and a type name, and gets back a `GatewayResult`.

Every call is a single attempt with three outcomes:

- success: a (possibly empty) sequence of tagged results in server order
- error response: a WARNING log and an empty result carrying the APIError
- transport failure: a WARNING log and an empty result carrying a TransportError

With ``strict=True`` the last two raise the APIError instead.

Example:
    ```python
    from gitlab_client_core.auth import ConfigurationStore
    from gitlab_client_core.gateway import APIGateway
    from gitlab_client_core.request import RequestDescriptor

    gateway = APIGateway(ConfigurationStore())
    projects = gateway.execute(RequestDescriptor.get("/projects"), "GitLab.Project")
    ```
"""

import logging

import httpx

from gitlab_client_core.auth.credentials import ConfigurationStore, Credentials
from gitlab_client_core.config import API_VERSION_PREFIX, PRIVATE_TOKEN_HEADER
from gitlab_client_core.errors.exceptions import APIError, ResponseDecodeError
from gitlab_client_core.errors.handler import (
    error_for_response,
    error_for_transport_failure,
    status_codes_hint,
)
from gitlab_client_core.request import RequestDescriptor
from gitlab_client_core.results import GatewayResult

logger = logging.getLogger(__name__)


class APIGateway:
    """Authenticate, dispatch and classify one API call at a time.

    The gateway keeps no state between calls: credentials are re-read from the
    store and a fresh `httpx.Client` is used for every `execute`.

    Args:
        store: Where credentials are loaded from. Defaults to a
            `ConfigurationStore` at the standard location.
        transport: Optional httpx transport, e.g. `httpx.MockTransport` in tests.
        strict: Raise APIError instead of returning a failed result.
        api_prefix: Version prefix inserted between domain and path.
    """

    def __init__(
        self,
        store: ConfigurationStore | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        strict: bool = False,
        api_prefix: str = API_VERSION_PREFIX,
    ) -> None:
        self._store = store if store is not None else ConfigurationStore()
        self._transport = transport
        self.strict = strict
        self.api_prefix = api_prefix

    @property
    def store(self) -> ConfigurationStore:
        return self._store

    def build_url(self, credentials: Credentials, descriptor: RequestDescriptor) -> str:
        """Compose ``domain + api_prefix + path + query``."""
        return credentials.domain.rstrip("/") + self.api_prefix + descriptor.relative_url

    def build_headers(self, credentials: Credentials, descriptor: RequestDescriptor) -> httpx.Headers:
        """Merge caller headers with the auth header, which always wins."""
        headers = httpx.Headers(dict(descriptor.extra_headers))
        if PRIVATE_TOKEN_HEADER in headers:
            logger.warning(
                f"Ignoring caller-supplied {PRIVATE_TOKEN_HEADER} header for "
                f"{descriptor.method.value} {descriptor.path}; the configured token is used"
            )
        # Headers.__setitem__ replaces every case-insensitive match
        headers[PRIVATE_TOKEN_HEADER] = credentials.token
        return headers

    def execute(
        self,
        descriptor: RequestDescriptor,
        type_name: str,
        *,
        strict: bool | None = None,
    ) -> GatewayResult:
        """Execute one request and tag the decoded results with `type_name`.

        Args:
            descriptor: The request to send.
            type_name: Logical type attached to every result, e.g. "GitLab.Project".
            strict: Overrides the gateway-wide strict setting for this call.

        Returns:
            GatewayResult with the tagged items, or empty with `error` set.

        Raises:
            CredentialError: If credentials are missing or unreadable
                (NotConfiguredError when nothing has been saved yet).
            APIError: Only in strict mode, when the call failed.
        """
        credentials = self._store.load()

        operation = f"{descriptor.method.value} {descriptor.path}"
        url = self.build_url(credentials, descriptor)
        headers = self.build_headers(credentials, descriptor)
        hint = status_codes_hint(credentials.domain)
        body = dict(descriptor.body) if descriptor.body is not None else None

        logger.debug(f"Dispatching {descriptor.method.value} {url} ({PRIVATE_TOKEN_HEADER}: ***)")

        error: APIError | None = None
        result: GatewayResult | None = None
        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.request(descriptor.method.value, url, headers=headers, json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error = error_for_transport_failure(e, hint=hint, operation=operation)
        else:
            error = error_for_response(response, hint=hint, operation=operation)
            if error is None:
                try:
                    result = GatewayResult.from_payload(type_name, response.json() if response.content else None)
                except ValueError as e:
                    error = ResponseDecodeError(
                        f"{operation} returned HTTP {response.status_code} with a body that is not JSON: {e}",
                        status_code=response.status_code,
                        response=response,
                        status_description=f"{response.status_code} {response.reason_phrase}".strip(),
                        hint=hint,
                    )

        if error is not None:
            if strict is None:
                strict = self.strict
            if strict:
                raise error
            logger.warning(str(error))
            return GatewayResult.failure(type_name, error)

        logger.debug(f"{operation} returned {len(result)} {type_name} item(s)")
        return result
