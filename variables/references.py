"""
Dependency references: how a derived variable reads one of its inputs.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import VariableDefinitionError
from core.schema import PROJECTION_ALIASES, Projection


class DependencyReference(BaseModel):
    """
    One input of a derived variable.

    source_name : variable to read
    look_behind : periods to step back (0 = same period)
    projection  : current / sum / average; only meaningful for derived sources,
                  internal and external histories always yield their raw value
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    source_name: str = Field(alias="sourceName", min_length=1)
    look_behind: int = Field(default=0, ge=0, alias="lookBehind")
    projection: Projection = "current"

    @field_validator("projection", mode="before")
    @classmethod
    def _normalise_projection(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return PROJECTION_ALIASES.get(value, value)
        return value

    def period_index(self, period: int) -> int:
        return period - self.look_behind


ReferenceLike = Union[DependencyReference, Mapping[str, Any], str]


def _translate_mapping(raw: Mapping[str, Any]) -> dict:
    # legacy keys: `name` for source_name, `type` for projection
    data = dict(raw)
    if "name" in data and "source_name" not in data and "sourceName" not in data:
        data["source_name"] = data.pop("name")
    if "type" in data and "projection" not in data:
        data["projection"] = data.pop("type")
    return data


def coerce_reference(ref: ReferenceLike) -> DependencyReference:
    """Build a DependencyReference from a reference, a mapping or a bare name."""
    if isinstance(ref, DependencyReference):
        return ref
    try:
        if isinstance(ref, str):
            return DependencyReference(source_name=ref)
        if isinstance(ref, Mapping):
            return DependencyReference.model_validate(_translate_mapping(ref))
    except ValidationError as exc:
        raise VariableDefinitionError(f"Malformed dependency reference {ref!r}: {exc}") from exc
    raise VariableDefinitionError(f"Unsupported dependency reference: {ref!r}")


def coerce_references(refs: Optional[Iterable[ReferenceLike]]) -> List[DependencyReference]:
    if refs is None:
        return []
    if isinstance(refs, (str, Mapping, DependencyReference)):
        raise VariableDefinitionError("dependencies must be a list of references")
    return [coerce_reference(r) for r in refs]
