"""High-level GitLab client."""

from pathlib import Path

import httpx

from gitlab_client_core.auth.credentials import ConfigurationStore, Credentials
from gitlab_client_core.gateway import APIGateway
from gitlab_client_core.resources import EventsResource, ProjectsResource


class GitLabClient:
    """Entry point wiring the configuration store, the gateway and resources.

    Example:
        ```python
        client = GitLabClient()
        client.configure(token="glpat-123", domain="https://gitlab.example.com")

        for project in client.projects.list(scope="owned", order_by="name"):
            print(project["path_with_namespace"])
        ```
    """

    def __init__(
        self,
        store: ConfigurationStore | None = None,
        *,
        config_root: str | Path | None = None,
        transport: httpx.BaseTransport | None = None,
        strict: bool = False,
    ):
        if store is None:
            store = ConfigurationStore(config_root)
        elif config_root is not None:
            raise ValueError("Pass either store or config_root, not both")

        self.store = store
        self.gateway = APIGateway(store, transport=transport, strict=strict)
        self.projects = ProjectsResource(self.gateway)
        self.events = EventsResource(self.gateway)

    def configure(self, token: str, domain: str) -> Credentials:
        """Persist the token and domain used by every later request."""
        return self.store.save(token=token, domain=domain)

    def credentials(self) -> Credentials:
        return self.store.load()
