"""Query-string and path-segment encoding."""

from collections.abc import Iterable

QueryValue = str | int | bool


def _render(value: QueryValue) -> str:
    # The API spells booleans in lowercase
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(filters: Iterable[tuple[str, QueryValue]]) -> str:
    """Build a query suffix from ordered ``(key, value)`` filters.

    Output order is exactly input order. Values are not URL-encoded; callers
    encode anything that needs it before adding the filter.

    Args:
        filters: Ordered key/value pairs.

    Returns:
        ``""`` when there are no filters, otherwise ``"?k1=v1&k2=v2..."``.

    Example:
        ```python
        build_query_string([("archived", True), ("order_by", "name")])
        # '?archived=true&order_by=name'
        ```
    """
    parts = [f"{key}={_render(value)}" for key, value in filters]
    if not parts:
        return ""
    return "?" + "&".join(parts)


def encode_path_segment(value: str | int) -> str:
    """Encode a project id or namespace for use as a single path segment.

    Spaces are stripped and ``/`` becomes ``%2F``, so ``"my group/my project"``
    turns into ``"mygroup%2Fmyproject"``.
    """
    if isinstance(value, int):
        return str(value)
    return value.replace(" ", "").replace("/", "%2F")
