"""Query-string encoding and merging on top of httpx.QueryParams."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from operator import itemgetter
from typing import Any

import httpx


def _list_key(key: str) -> str:
    return key if key.endswith("[]") else f"{key}[]"


def _flatten_item(key: str, value: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _flatten_item(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield _list_key(key), item
    else:
        yield key, value


def flatten(params: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """Flatten REST params into ``(key, value)`` pairs.

    Nested mappings become ``key[sub]`` and list values become repeated
    ``key[]`` entries.

    Usage:
        flatten({"status[in]": ["draft", "published"]})
        # [("status[in][]", "draft"), ("status[in][]", "published")]
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        pairs.extend(_flatten_item(key, value))
    return pairs


def sort_params(params: httpx.QueryParams) -> httpx.QueryParams:
    """Order params by key, keeping the order of repeated values."""
    return httpx.QueryParams(sorted(params.multi_items(), key=itemgetter(0)))


def merge(existing: str, params: Mapping[str, Any]) -> httpx.QueryParams:
    """Merge fresh REST params over an existing query string.

    Keys present in ``params`` replace every value of the same key in
    ``existing``; unrelated existing keys are kept.
    """
    merged = httpx.QueryParams(existing).merge(httpx.QueryParams(flatten(params)))
    return sort_params(merged)
