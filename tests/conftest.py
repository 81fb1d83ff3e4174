"""Shared test fixtures and sample params."""

from __future__ import annotations

import re
from typing import Any

import pytest
from pydantic import BaseModel, Field

_BRACKETS = re.compile(r"\[([^\]]*)\]")


class Pet(BaseModel):
    """Resource schema with name, species and age filterable."""

    name: str = Field(json_schema_extra={"filterable": True})
    species: str = Field(json_schema_extra={"filterable": True})
    age: int = Field(json_schema_extra={"filterable": True})
    internal_code: str | None = None


class Event:
    """Resource exposing its filterable fields through a classmethod."""

    @classmethod
    def filterable_fields(cls) -> list[str]:
        return ["status", "starts_at"]


SAMPLE_PARAMS: dict[str, Any] = {
    "status": "published",
    "starts_at": {"gte": "2024-01-01"},
    "sort": "-starts_at",
    "limit": "20",
    "after": "abc123",
}

SAMPLE_LIST_PARAMS: dict[str, Any] = {
    "status": {"in": {"": ["draft", "published"]}},
}


def nest_params(flat: dict[str, Any]) -> dict[str, Any]:
    """Nest ``field[op]`` keys the way a web framework parses them."""
    nested: dict[str, Any] = {}
    for key, value in flat.items():
        base, _, rest = key.partition("[")
        ops = _BRACKETS.findall(f"[{rest}") if rest else []
        if not ops:
            nested[base] = value
            continue
        target = nested.setdefault(base, {})
        for op in ops[:-1]:
            target = target.setdefault(op, {})
        target[ops[-1]] = value
    return nested


@pytest.fixture
def sample_params() -> dict[str, Any]:
    return dict(SAMPLE_PARAMS)
