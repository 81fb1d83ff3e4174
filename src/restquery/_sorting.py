"""Sort string parsing and serialization."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from restquery.models.query import Query

SORT_KEY = "sort"
SORT_KEYS: frozenset[str] = frozenset({SORT_KEY})


class SortDirection(str, Enum):
    """Canonical sort directions."""

    ASC = "asc"
    DESC = "desc"
    ASC_NULLS_FIRST = "asc_nulls_first"
    ASC_NULLS_LAST = "asc_nulls_last"
    DESC_NULLS_FIRST = "desc_nulls_first"
    DESC_NULLS_LAST = "desc_nulls_last"


_DESCENDING = frozenset(
    {SortDirection.DESC, SortDirection.DESC_NULLS_FIRST, SortDirection.DESC_NULLS_LAST}
)


def reserved_keys() -> frozenset[str]:
    """Return the param keys claimed by sorting."""
    return SORT_KEYS


def _parse_field(token: str) -> tuple[str, str]:
    if token.startswith("-"):
        return token[1:], SortDirection.DESC.value
    if token.startswith("+"):
        return token[1:], SortDirection.ASC.value
    return token, SortDirection.ASC.value


def parse(sort: str | Sequence[str] | None) -> dict[str, list[str]]:
    """Parse a sort string like ``"-starts_at,name"`` into order lists.

    Returns an empty dict when there is nothing to sort by, so callers never
    see empty ``order_by`` / ``order_directions`` lists.

    Usage:
        parse("-starts_at,name")
        # {"order_by": ["starts_at", "name"], "order_directions": ["desc", "asc"]}
    """
    if not sort:
        return {}
    if isinstance(sort, Sequence) and not isinstance(sort, str):
        # sort[]=-a&sort[]=b arrives as a list
        sort = ",".join(str(part) for part in sort)
    elif not isinstance(sort, str):
        sort = str(sort)

    tokens = [token.strip() for token in sort.split(",")]
    parsed = [_parse_field(token) for token in tokens if token]
    if not parsed:
        return {}

    fields, directions = zip(*parsed)
    return {"order_by": list(fields), "order_directions": list(directions)}


def _is_descending(direction: Any) -> bool:
    try:
        return SortDirection(direction) in _DESCENDING
    except ValueError:
        return False


def format_sort(fields: Sequence[Any], directions: Sequence[Any] | None = None) -> str:
    """Serialize order lists back to a comma-separated sort string.

    Directions missing from the tail default to ascending.
    """
    directions = directions or []
    parts: list[str] = []
    for index, field in enumerate(fields):
        direction = directions[index] if index < len(directions) else SortDirection.ASC
        parts.append(f"-{field}" if _is_descending(direction) else str(field))
    return ",".join(parts)


def to_rest(query: Query) -> dict[str, str]:
    """Convert the sort fields of a query to a REST ``sort`` param."""
    if not query.order_by:
        return {}
    return {SORT_KEY: format_sort(query.order_by, query.order_directions)}
