"""Project event endpoints."""

from gitlab_client_core.gateway import APIGateway
from gitlab_client_core.query import QueryValue
from gitlab_client_core.request import RequestDescriptor
from gitlab_client_core.resources.projects import project_path
from gitlab_client_core.results import GatewayResult

EVENT_TYPE = "GitLab.Project.Event"


class EventsResource:
    """Read the activity feed of a project."""

    def __init__(self, gateway: APIGateway):
        self._gateway = gateway

    def list(self, project: str | int, *, page: int | None = None, per_page: int | None = None) -> GatewayResult:
        filters: list[tuple[str, QueryValue]] = []
        if page is not None:
            filters.append(("page", page))
        if per_page is not None:
            filters.append(("per_page", per_page))

        descriptor = RequestDescriptor.get(f"{project_path(project)}/events", query=filters)
        return self._gateway.execute(descriptor, EVENT_TYPE)
