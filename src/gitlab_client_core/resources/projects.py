"""Project endpoints."""

from typing import Any
from urllib.parse import quote

from gitlab_client_core.gateway import APIGateway
from gitlab_client_core.query import QueryValue, encode_path_segment
from gitlab_client_core.request import RequestDescriptor
from gitlab_client_core.results import GatewayResult

PROJECT_TYPE = "GitLab.Project"

PROJECT_SCOPES = {
    None: "/projects",
    "owned": "/projects/owned",
    "all": "/projects/all",
}


def project_path(project: str | int) -> str:
    """Path of a single project addressed by numeric id or ``namespace/name``."""
    return f"/projects/{encode_path_segment(project)}"


class ProjectsResource:
    """Project operations built on the API gateway."""

    def __init__(self, gateway: APIGateway):
        self._gateway = gateway

    def list(
        self,
        *,
        scope: str | None = None,
        archived: bool = False,
        order_by: str | None = None,
        sort: str | None = None,
        search: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> GatewayResult:
        """List projects visible to the token owner.

        Args:
            scope: None for the user's projects, "owned" for projects the user
                owns, "all" for every project (admin only).
            archived: Only return archived projects.
            order_by: Field to order by, e.g. "name" or "last_activity_at".
            sort: "asc" or "desc".
            search: Match projects by name.
            page: Page number to fetch.
            per_page: Items per page.
        """
        if scope not in PROJECT_SCOPES:
            raise ValueError(f"Unknown project scope {scope!r}, expected one of: owned, all")

        filters: list[tuple[str, QueryValue]] = []
        if archived:
            filters.append(("archived", True))
        if order_by:
            filters.append(("order_by", order_by))
        if sort:
            filters.append(("sort", sort))
        if search:
            # Free text; build_query_string does not encode values
            filters.append(("search", quote(search, safe="")))
        if page is not None:
            filters.append(("page", page))
        if per_page is not None:
            filters.append(("per_page", per_page))

        descriptor = RequestDescriptor.get(PROJECT_SCOPES[scope], query=filters)
        return self._gateway.execute(descriptor, PROJECT_TYPE)

    def get(self, project: str | int) -> GatewayResult:
        return self._gateway.execute(RequestDescriptor.get(project_path(project)), PROJECT_TYPE)

    def create(self, name: str, **attributes: Any) -> GatewayResult:
        """Create a project named `name`.

        Extra keyword arguments (``path``, ``description``, ``namespace_id``,
        ``visibility_level``...) are sent as-is; None values are dropped.
        """
        body: dict[str, Any] = {"name": name}
        body.update({key: value for key, value in attributes.items() if value is not None})
        return self._gateway.execute(RequestDescriptor.post("/projects", body=body), PROJECT_TYPE)

    def delete(self, project: str | int) -> GatewayResult:
        return self._gateway.execute(RequestDescriptor.delete(project_path(project)), PROJECT_TYPE)
