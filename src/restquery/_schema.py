"""Resolve the set of filterable field names for a resource."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from pydantic import BaseModel

FILTERABLE_FLAG = "filterable"


class FilterableResource(Protocol):
    """Anything that can list the field names allowed as filters."""

    def filterable_fields(self) -> Iterable[str]: ...


def _model_filterable(model: type[BaseModel]) -> frozenset[str]:
    names: set[str] = set()
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra
        if isinstance(extra, dict) and extra.get(FILTERABLE_FLAG):
            names.add(info.alias or name)
    return frozenset(names)


def resolve_filterable(
    resource: FilterableResource | type[BaseModel] | Iterable[str] | None,
) -> frozenset[str] | None:
    """Return the filterable field names for ``resource``.

    ``resource`` may be None (allow every field), an object or class with a
    ``filterable_fields()`` method, a pydantic model class (or instance) whose
    fields are marked with ``Field(json_schema_extra={"filterable": True})``, or an
    iterable of field names.

    Usage:
        class Pet(BaseModel):
            name: str = Field(json_schema_extra={"filterable": True})
            internal_code: str

        resolve_filterable(Pet)  # frozenset({"name"})
    """
    if resource is None:
        return None
    if callable(getattr(resource, "filterable_fields", None)):
        return frozenset(resource.filterable_fields())
    if isinstance(resource, BaseModel):
        resource = type(resource)
    if isinstance(resource, type) and issubclass(resource, BaseModel):
        return _model_filterable(resource)
    if isinstance(resource, str):
        return frozenset({resource})
    return frozenset(resource)
