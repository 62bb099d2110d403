"""Testing utilities for code built on the GitLab client.

`MockGitLabServer` routes requests to canned responses through
`httpx.MockTransport` and records every request it receives, so tests can
check URLs and headers without a network.

Example:
    ```python
    from gitlab_client_core import GitLabClient
    from gitlab_client_core.testing import MockGitLabServer

    server = MockGitLabServer()
    server.add("GET", "/api/v3/projects", json=[{"id": 1}, {"id": 2}])

    client = GitLabClient(config_root=tmp_path, transport=server.transport)
    client.configure(token="secret", domain="https://gitlab.example.com")

    assert len(client.projects.list()) == 2
    assert server.requests[0].headers["PRIVATE-TOKEN"] == "secret"
    ```
"""

from collections.abc import Callable
from typing import Any

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


class MockGitLabServer:
    """Route ``(method, path)`` to canned responses and record requests.

    Paths are matched against the raw (still percent-encoded) request path,
    without the query string. Unrouted requests get a GitLab-style 404.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Register a canned response for `method` and `path`."""

        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text, headers=headers)
            if json is not None:
                return httpx.Response(status_code, json=json, headers=headers)
            return httpx.Response(status_code, headers=headers)

        self._routes[(method.upper(), path)] = handler

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        self._routes[(method.upper(), path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        handler = self._routes.get((request.method, path))
        if handler is None:
            return httpx.Response(404, json={"message": "404 Not Found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last_request(self) -> httpx.Request:
        if not self.requests:
            raise AssertionError("No request was sent to the mock server")
        return self.requests[-1]
