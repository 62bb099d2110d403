"""Tagged results returned by the API gateway."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    from gitlab_client_core.errors.exceptions import APIError


@dataclass(frozen=True)
class TaggedResult:
    """One decoded response item plus its logical type name.

    `type_name` is a discriminator such as ``"GitLab.Project"``; it lets
    downstream code tell heterogeneous results apart without inspecting `data`.
    """

    type_name: str
    data: Any

    def get(self, key: str, default: Any = None) -> Any:
        """Look up `key` in a mapping payload, returning `default` otherwise."""
        if isinstance(self.data, dict):
            return self.data.get(key, default)
        return default

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


class GatewayResult(Sequence[TaggedResult]):
    """Outcome of one gateway call.

    Behaves as an immutable sequence of `TaggedResult` in server order. When
    the call failed the sequence is empty and `error` holds the classified
    `APIError`, so failures are never silently dropped.

    Example:
        ```python
        result = gateway.execute(RequestDescriptor.get("/projects"), "GitLab.Project")
        if not result.ok:
            print(result.error)
        for project in result:
            print(project["name"])
        ```
    """

    def __init__(self, type_name: str, items: Iterable[TaggedResult] = (), error: "APIError | None" = None):
        self._type_name = type_name
        self._items = tuple(items)
        self._error = error

        if error is not None and self._items:
            raise ValueError("A failed GatewayResult cannot carry items")

    @classmethod
    def from_payload(cls, type_name: str, payload: Any) -> "GatewayResult":
        """Tag a decoded JSON payload.

        A list yields one result per element, in order. None (empty body)
        yields nothing. Anything else yields a single result.
        """
        if payload is None:
            return cls(type_name)
        if isinstance(payload, list):
            return cls(type_name, (TaggedResult(type_name, item) for item in payload))
        return cls(type_name, [TaggedResult(type_name, payload)])

    @classmethod
    def failure(cls, type_name: str, error: "APIError") -> "GatewayResult":
        return cls(type_name, error=error)

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def error(self) -> "APIError | None":
        return self._error

    @property
    def ok(self) -> bool:
        return self._error is None

    def raise_for_error(self) -> "GatewayResult":
        """Raise the stored APIError, or return self when the call succeeded."""
        if self._error is not None:
            raise self._error
        return self

    def data(self) -> list[Any]:
        """Return the untagged payloads."""
        return [item.data for item in self._items]

    @overload
    def __getitem__(self, index: int) -> TaggedResult: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TaggedResult, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TaggedResult]:
        return iter(self._items)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"GatewayResult(type_name={self._type_name!r}, error={self._error!r})"
        return f"GatewayResult(type_name={self._type_name!r}, items={len(self._items)})"
