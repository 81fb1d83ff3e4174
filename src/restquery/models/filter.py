"""Canonical filter model."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Filter(BaseModel):
    """A single filter condition on a field."""

    model_config = ConfigDict(frozen=True)

    field: str
    op: str = "=="
    value: Any = None

    @field_validator("field", "op", mode="before")
    @classmethod
    def _enum_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value
