"""Resource operations: thin callers that build request descriptors."""

from gitlab_client_core.resources.events import EVENT_TYPE, EventsResource
from gitlab_client_core.resources.projects import PROJECT_TYPE, ProjectsResource, project_path

__all__ = [
    "EVENT_TYPE",
    "EventsResource",
    "PROJECT_TYPE",
    "ProjectsResource",
    "project_path",
]
