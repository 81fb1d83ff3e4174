"""Canonical query model and the result metadata wrapper."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from restquery._sorting import SortDirection
from restquery.models.filter import Filter


class Query(BaseModel):
    """Filtering, sorting and pagination parameters for the query engine.

    At most one pagination shape is expected to be populated:
    ``first``/``after``, ``last``/``before``, ``page``/``page_size`` or
    ``offset``/``limit``. Nothing enforces this here.
    """

    model_config = ConfigDict(frozen=True)

    filters: list[Filter] = Field(default_factory=list)
    order_by: list[str] | None = None
    order_directions: list[SortDirection | str] | None = None
    first: int | None = None
    after: str | int | None = None
    last: int | None = None
    before: str | int | None = None
    page: int | None = None
    page_size: int | None = None
    offset: int | None = None
    limit: int | None = None


class Meta(BaseModel):
    """Result metadata returned alongside a page of results."""

    model_config = ConfigDict(frozen=True)

    query: Query = Field(default_factory=Query)
    total_count: int | None = None
    total_pages: int | None = None
    current_page: int | None = None
    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: str | int | None = None
    end_cursor: str | int | None = None
    errors: list[str] = Field(default_factory=list)


def unwrap_query(obj: Query | Meta | Mapping[str, Any] | Any) -> Query:
    """Return the canonical query carried by ``obj``.

    Accepts a Query, any wrapper exposing a ``query`` attribute holding one,
    a dumped wrapper whose ``"query"`` key holds one, or a canonical mapping
    such as the output of ``normalize``.
    """
    if isinstance(obj, Query):
        return obj
    wrapped = getattr(obj, "query", None)
    if isinstance(wrapped, Query):
        return wrapped
    if isinstance(obj, Mapping):
        wrapped = obj.get("query")
        if isinstance(wrapped, Query):
            return wrapped
        if isinstance(wrapped, Mapping):
            return Query.model_validate(wrapped)
        return Query.model_validate(obj)
    raise TypeError(f"Cannot extract a query from {type(obj).__name__}")
