"""Pagination mode detection and transformation.

Three pagination styles are supported:

- **Cursor-based**: ``limit``, ``after``, ``before``
- **Page-based**: ``page``, ``page_size``
- **Offset-based**: ``offset``, ``limit``

No validation is performed: conflicting params resolve to a single mode by
priority and everything else is left for the query engine to judge.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from restquery.exceptions import MalformedParameterError

if TYPE_CHECKING:
    from restquery.models.query import Query

LIMIT_KEY = "limit"
FORWARD_CURSOR_KEY = "after"
BACKWARD_CURSOR_KEY = "before"
PAGE_KEY = "page"
PAGE_SIZE_KEY = "page_size"
OFFSET_KEY = "offset"

CURSOR_KEYS: frozenset[str] = frozenset({FORWARD_CURSOR_KEY, BACKWARD_CURSOR_KEY})
PAGE_KEYS: frozenset[str] = frozenset({PAGE_KEY, PAGE_SIZE_KEY})
OFFSET_KEYS: frozenset[str] = frozenset({OFFSET_KEY})
PAGINATION_KEYS: frozenset[str] = CURSOR_KEYS | PAGE_KEYS | OFFSET_KEYS | {LIMIT_KEY}

_INTEGER = re.compile(r"[+-]?\d+")


class PaginationMode(str, Enum):
    """Pagination style implied by a set of params."""

    NONE = "none"
    CURSOR = "cursor"
    PAGE = "page"
    OFFSET = "offset"


# Mode assumed when ``limit`` is the only pagination param.
BARE_LIMIT_MODE = PaginationMode.CURSOR

# (canonical field, REST key, numeric) per pagination shape.
_Fields = tuple[tuple[str, str, bool], ...]

CURSOR_FORWARD_FIELDS: _Fields = (
    ("first", LIMIT_KEY, True),
    ("after", FORWARD_CURSOR_KEY, False),
)
CURSOR_BACKWARD_FIELDS: _Fields = (
    ("last", LIMIT_KEY, True),
    ("before", BACKWARD_CURSOR_KEY, False),
)
PAGE_FIELDS: _Fields = (
    ("page", PAGE_KEY, True),
    ("page_size", PAGE_SIZE_KEY, True),
)
OFFSET_FIELDS: _Fields = (
    ("offset", OFFSET_KEY, True),
    ("limit", LIMIT_KEY, True),
)


def reserved_keys() -> frozenset[str]:
    """Return the param keys claimed by pagination."""
    return PAGINATION_KEYS


def parse_int(key: str, value: Any) -> int:
    """Parse a numeric pagination value, raising MalformedParameterError on failure."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value):
        return int(value)
    raise MalformedParameterError(key, value)


def detect_mode(
    params: Mapping[str, Any],
    bare_limit_mode: PaginationMode = BARE_LIMIT_MODE,
) -> PaginationMode:
    """Detect the pagination mode by priority: cursor, page, offset, bare limit."""
    keys = params.keys()
    if keys & CURSOR_KEYS:
        return PaginationMode.CURSOR
    if keys & PAGE_KEYS:
        return PaginationMode.PAGE
    if keys & OFFSET_KEYS:
        return PaginationMode.OFFSET
    if LIMIT_KEY in keys:
        return bare_limit_mode
    return PaginationMode.NONE


def _fields_for(params: Mapping[str, Any], mode: PaginationMode) -> _Fields:
    if mode is PaginationMode.CURSOR:
        if BACKWARD_CURSOR_KEY in params:
            return CURSOR_BACKWARD_FIELDS
        return CURSOR_FORWARD_FIELDS
    if mode is PaginationMode.PAGE:
        return PAGE_FIELDS
    if mode is PaginationMode.OFFSET:
        return OFFSET_FIELDS
    return ()


def transform(
    params: Mapping[str, Any],
    *,
    bare_limit_mode: PaginationMode = BARE_LIMIT_MODE,
) -> dict[str, Any]:
    """Transform REST pagination params to canonical pagination fields.

    Usage:
        transform({"limit": "20", "after": "abc"})      # {"first": 20, "after": "abc"}
        transform({"page": "2", "page_size": "25"})     # {"page": 2, "page_size": 25}
        transform({"offset": "50", "limit": "25"})      # {"offset": 50, "limit": 25}
    """
    fields = _fields_for(params, detect_mode(params, bare_limit_mode))
    return {
        name: parse_int(key, params[key]) if numeric else params[key]
        for name, key, numeric in fields
        if params.get(key) is not None
    }


def query_mode_fields(query: Query) -> _Fields:
    """Pick the pagination shape populated on a query.

    Priority mirrors detection: forward cursor, backward cursor, page, offset.
    """
    for fields in (CURSOR_FORWARD_FIELDS, CURSOR_BACKWARD_FIELDS, PAGE_FIELDS, OFFSET_FIELDS):
        if any(getattr(query, name) is not None for name, _, _ in fields):
            return fields
    return ()


def to_rest(query: Query) -> dict[str, Any]:
    """Convert the pagination fields of a query back to REST params."""
    return {
        key: getattr(query, name)
        for name, key, _ in query_mode_fields(query)
        if getattr(query, name) is not None
    }
