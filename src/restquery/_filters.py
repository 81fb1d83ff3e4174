"""Filter extraction from REST params and the reverse conversion."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from typing import Any, TypedDict

from restquery import _operators, _pagination, _sorting
from restquery._operators import Operator
from restquery.models.filter import Filter


class FilterRecord(TypedDict):
    field: str
    op: str
    value: Any


def reserved_keys() -> frozenset[str]:
    """Return every param key claimed by pagination or sorting."""
    return _pagination.reserved_keys() | _sorting.reserved_keys()


def base_field(key: str) -> str:
    """Return the field part of ``field`` or ``field[op]``."""
    return key.split("[", 1)[0]


def _unwrap_list(value: Any) -> Any:
    # status[in][]=draft&status[in][]=published may arrive as {"": ["draft", "published"]}
    if isinstance(value, Mapping) and len(value) == 1:
        inner = value.get("")
        if isinstance(inner, list):
            return inner
    return value


def expand_filter(field: str, value: Any) -> list[FilterRecord]:
    """Expand one param into filter records.

    Bare values become equality filters; operator mappings become one record
    per operator. Unknown operators are kept verbatim.
    """
    if isinstance(value, Mapping):
        return [
            FilterRecord(field=field, op=_operators.to_canonical(op), value=_unwrap_list(val))
            for op, val in value.items()
        ]
    return [FilterRecord(field=field, op=Operator.EQ.value, value=value)]


def _unreserved(params: Mapping[str, Any]) -> list[tuple[str, Any]]:
    reserved = reserved_keys()
    return [(key, value) for key, value in params.items() if key not in reserved]


def extract(params: Mapping[str, Any]) -> list[FilterRecord]:
    """Extract filter records from a params mapping.

    Usage:
        extract({"status": "published", "amount": {"gte": "100"}})
        # [{"field": "status", "op": "==", "value": "published"},
        #  {"field": "amount", "op": ">=", "value": "100"}]
    """
    filters, _ = partition(params, None)
    return filters


def partition(
    params: Mapping[str, Any],
    filterable: Set[str] | None,
) -> tuple[list[FilterRecord], dict[str, Any]]:
    """Split params into filter records and extra params.

    When ``filterable`` is None every non-reserved param becomes a filter.
    Otherwise only params whose base field is in the set become filters and
    the rest are returned unchanged as extras. Reserved pagination and sort
    keys appear in neither.
    """
    filters: list[FilterRecord] = []
    extras: dict[str, Any] = {}
    for key, value in _unreserved(params):
        if filterable is None or base_field(key) in filterable:
            filters.extend(expand_filter(key, value))
        else:
            extras[key] = value
    return filters, extras


def _rest_pair(flt: Filter) -> tuple[str, Any]:
    rest_op = _operators.to_rest(flt.op)
    if rest_op is None:
        return flt.field, flt.value
    return f"{flt.field}[{rest_op}]", flt.value


def to_rest(filters: Iterable[Filter | Mapping[str, Any]] | None) -> dict[str, Any]:
    """Convert filters back to REST params.

    Equality filters become bare ``field`` params, other operators become
    ``field[op]`` keys. Brackets are left unescaped.
    """
    if not filters:
        return {}
    return dict(
        _rest_pair(flt if isinstance(flt, Filter) else Filter.model_validate(flt))
        for flt in filters
    )
