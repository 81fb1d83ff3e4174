"""Mapping between REST operator tokens and canonical filter operators."""

from __future__ import annotations

from enum import Enum


class Operator(str, Enum):
    """Canonical filter operators understood by the query engine."""

    EQ = "=="
    NE = "!="
    SEARCH = "=~"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    EMPTY = "empty"
    NOT_EMPTY = "not_empty"
    IN = "in"
    NOT_IN = "not_in"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    LIKE = "like"
    NOT_LIKE = "not_like"
    LIKE_AND = "like_and"
    LIKE_OR = "like_or"
    ILIKE = "ilike"
    NOT_ILIKE = "not_ilike"
    ILIKE_AND = "ilike_and"
    ILIKE_OR = "ilike_or"


# Tokens whose REST spelling differs from the canonical symbol.
_SYMBOLIC_TOKENS: dict[str, Operator] = {
    "eq": Operator.EQ,
    "ne": Operator.NE,
    "search": Operator.SEARCH,
    "lt": Operator.LT,
    "lte": Operator.LTE,
    "gt": Operator.GT,
    "gte": Operator.GTE,
}

REST_TO_CANONICAL: dict[str, Operator] = {
    **_SYMBOLIC_TOKENS,
    **{op.value: op for op in Operator if op not in _SYMBOLIC_TOKENS.values()},
}

CANONICAL_TO_REST: dict[Operator, str] = {
    op: token for token, op in REST_TO_CANONICAL.items() if op is not Operator.EQ
}


def to_canonical(token: str) -> str:
    """Convert a REST operator token to its canonical operator.

    Unknown tokens are returned verbatim so the query engine can reject them.

    Usage:
        to_canonical("gte")      # ">="
        to_canonical("unknown")  # "unknown"
    """
    operator = REST_TO_CANONICAL.get(token)
    if operator is None:
        return token
    return operator.value


def to_rest(op: str | Operator) -> str | None:
    """Convert a canonical operator to its REST token.

    Returns None for equality, which renders as a bare ``field=value`` param.
    Operators outside the known set are returned as strings.
    """
    try:
        operator = Operator(op)
    except ValueError:
        return str(op)
    if operator is Operator.EQ:
        return None
    return CANONICAL_TO_REST[operator]
