"""Immutable description of one API call before authentication is applied."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from http import HTTPMethod
from types import MappingProxyType
from typing import Any

from gitlab_client_core.config import API_VERSION_PREFIX
from gitlab_client_core.query import QueryValue, build_query_string

QueryParams = tuple[tuple[str, QueryValue], ...]


@dataclass(frozen=True)
class RequestDescriptor:
    """One pending HTTP call, relative to the API root.

    `path` is domain- and version-relative: the gateway adds the domain and the
    ``/api/v3`` prefix exactly once. Construction never touches the network.

    Example:
        ```python
        descriptor = RequestDescriptor.get("/projects", query=[("search", "core")])
        descriptor.relative_url  # '/projects?search=core'
        ```
    """

    method: HTTPMethod
    path: str
    query_params: QueryParams = ()
    body: Mapping[str, Any] | None = None
    extra_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.method, HTTPMethod):
            object.__setattr__(self, "method", HTTPMethod(str(self.method).upper()))

        if not self.path.startswith("/"):
            raise ValueError(f"Request path must start with '/': {self.path!r}")
        if "://" in self.path:
            raise ValueError(f"Request path must not contain a scheme or domain: {self.path!r}")
        if self.path == API_VERSION_PREFIX or self.path.startswith(API_VERSION_PREFIX + "/"):
            raise ValueError(f"Request path must not include the API prefix {API_VERSION_PREFIX}: {self.path!r}")

        object.__setattr__(self, "query_params", tuple((key, value) for key, value in self.query_params))
        object.__setattr__(self, "extra_headers", MappingProxyType(dict(self.extra_headers)))
        if self.body is not None:
            object.__setattr__(self, "body", MappingProxyType(dict(self.body)))

    @property
    def relative_url(self) -> str:
        """Path plus the encoded query suffix."""
        return self.path + build_query_string(self.query_params)

    def with_query(self, *pairs: tuple[str, QueryValue]) -> "RequestDescriptor":
        """Return a copy with `pairs` appended after the existing query parameters."""
        return replace(self, query_params=self.query_params + tuple(pairs))

    @classmethod
    def build(
        cls,
        method: HTTPMethod | str,
        path: str,
        *,
        query: Iterable[tuple[str, QueryValue]] = (),
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> "RequestDescriptor":
        return cls(
            method=method if isinstance(method, HTTPMethod) else HTTPMethod(method.upper()),
            path=path,
            query_params=tuple(query),
            body=body,
            extra_headers=headers or {},
        )

    @classmethod
    def get(cls, path: str, **kwargs: Any) -> "RequestDescriptor":
        return cls.build(HTTPMethod.GET, path, **kwargs)

    @classmethod
    def post(cls, path: str, **kwargs: Any) -> "RequestDescriptor":
        return cls.build(HTTPMethod.POST, path, **kwargs)

    @classmethod
    def put(cls, path: str, **kwargs: Any) -> "RequestDescriptor":
        return cls.build(HTTPMethod.PUT, path, **kwargs)

    @classmethod
    def delete(cls, path: str, **kwargs: Any) -> "RequestDescriptor":
        return cls.build(HTTPMethod.DELETE, path, **kwargs)
