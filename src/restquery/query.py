"""Public transformation functions: normalize, to_query and build_path."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from restquery import _filters, _pagination, _querystring, _sorting
from restquery._logging import log_transform
from restquery._pagination import BARE_LIMIT_MODE, PaginationMode
from restquery._schema import FilterableResource, resolve_filterable
from restquery.models.query import Meta, Query, unwrap_query

QueryLike = Query | Meta | Mapping[str, Any]


@log_transform
def normalize(
    params: Mapping[str, Any],
    filterable: FilterableResource | type[BaseModel] | Iterable[str] | None = None,
    *,
    bare_limit_mode: PaginationMode = BARE_LIMIT_MODE,
) -> dict[str, Any]:
    """Transform REST-style params to the canonical query schema.

    No validation is performed. Unknown operators and conflicting
    pagination params are passed through for the query engine to judge.

    Args:
        params: Params as parsed by the web framework, e.g.
            ``{"status": "published", "amount": {"gte": "100"}}``.
        filterable: Field names allowed as filters, or a resource that can
            provide them. When given, other non-reserved params are kept at
            the top level of the result instead of becoming filters.
        bare_limit_mode: Pagination mode used when ``limit`` is the only
            pagination param.

    Returns:
        Canonical mapping with only the keys that have something to report.

    Usage:
        normalize({"status": "published", "sort": "-starts_at", "limit": "20"})
        # {"filters": [{"field": "status", "op": "==", "value": "published"}],
        #  "first": 20,
        #  "order_by": ["starts_at"], "order_directions": ["desc"]}
    """
    filterable_set = resolve_filterable(filterable)
    filters, extras = _filters.partition(params, filterable_set)

    result: dict[str, Any] = {}
    if filters:
        result["filters"] = filters
    result.update(_pagination.transform(params, bare_limit_mode=bare_limit_mode))
    result.update(_sorting.parse(params.get(_sorting.SORT_KEY)))

    if filterable_set is None:
        return result
    return {**extras, **result}


@log_transform
def to_query(query: QueryLike) -> dict[str, Any]:
    """Convert a canonical query (or a wrapper carrying one) to REST params.

    Usage:
        to_query(Query(filters=[Filter(field="amount", op=">=", value=100)], page=2))
        # {"amount[gte]": 100, "page": 2}
    """
    query = unwrap_query(query)
    return {
        **_filters.to_rest(query.filters),
        **_sorting.to_rest(query),
        **_pagination.to_rest(query),
    }


@log_transform
def build_path(path: str, query: QueryLike) -> str:
    """Build a link path carrying the REST params of ``query``.

    Params already present in ``path`` are kept unless the query sets the
    same key, in which case the query's value wins.

    Usage:
        build_path("/events?page=1&species=dog", Query(page=3))
        # "/events?page=3&species=dog"
    """
    path, hash_mark, fragment = path.partition("#")
    base, _, existing = path.partition("?")

    merged = _querystring.merge(existing, to_query(query))
    link = f"{base}?{merged}" if merged else base
    return f"{link}{hash_mark}{fragment}"
