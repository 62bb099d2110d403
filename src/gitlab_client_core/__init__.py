"""GitLab Client Core - credential-aware client for the GitLab v3 API.

This library provides the request pipeline shared by every GitLab resource:
- Credential persistence ({domain, token}) in a per-user configuration file
- Ordered query-string encoding
- Immutable request descriptors
- Authenticated dispatch with structured error classification
- Results tagged with a logical type name

Example:
    ```python
    from gitlab_client_core import GitLabClient

    client = GitLabClient()
    client.configure(token="glpat-123", domain="https://gitlab.example.com")

    result = client.projects.list(archived=True, order_by="name")
    if not result.ok:
        print(result.error)
    for project in result:
        print(project.type_name, project["name"])
    ```
"""

from gitlab_client_core.auth import ConfigurationStore, Credentials
from gitlab_client_core.client import GitLabClient
from gitlab_client_core.gateway import APIGateway
from gitlab_client_core.query import build_query_string, encode_path_segment
from gitlab_client_core.request import RequestDescriptor
from gitlab_client_core.results import GatewayResult, TaggedResult

__version__ = "0.1.0"

__all__ = [
    "APIGateway",
    "ConfigurationStore",
    "Credentials",
    "GatewayResult",
    "GitLabClient",
    "RequestDescriptor",
    "TaggedResult",
    "__version__",
    "build_query_string",
    "encode_path_segment",
]
