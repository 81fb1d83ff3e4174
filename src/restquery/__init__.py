"""restquery: Stripe-style REST query params to a canonical filter/sort/pagination schema."""

from restquery._operators import Operator
from restquery._pagination import BARE_LIMIT_MODE, PaginationMode
from restquery._sorting import SortDirection
from restquery.exceptions import MalformedParameterError, RestQueryError
from restquery.models import Filter, Meta, Query, unwrap_query
from restquery.query import build_path, normalize, to_query

__all__ = [
    "BARE_LIMIT_MODE",
    "Filter",
    "MalformedParameterError",
    "Meta",
    "Operator",
    "PaginationMode",
    "Query",
    "RestQueryError",
    "SortDirection",
    "build_path",
    "normalize",
    "to_query",
    "unwrap_query",
]

__version__ = "0.1.0"
