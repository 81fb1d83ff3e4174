"""restquery canonical models."""

from restquery.models.filter import Filter
from restquery.models.query import Meta, Query, unwrap_query

__all__ = [
    "Filter",
    "Meta",
    "Query",
    "unwrap_query",
]
