"""
Filter Criteria - Expression Models

Typed criteria, filters and filter groups. Criteria are a tagged union
discriminated by ``type``; every variant carries only the fields that make
sense for it and fills in its own defaults.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from filter_criteria.core.types import (
    UNDEFINED,
    ArrayOperator,
    BooleanOperator,
    DateOperator,
    GeoOperator,
    LogicalOperator,
    MapOperator,
    NumberOperator,
    ObjectOperator,
    SetOperator,
    StringOperator,
)


class PathRef(BaseModel):
    """Dynamic match value: resolved against the record at evaluation time."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: list[str] = Field(alias="$path")

    @field_validator("path", mode="before")
    @classmethod
    def split_dotted_path(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [segment for segment in v.split(".") if segment]
        return v


# =============================================================================
# Criteria
# =============================================================================

class CriteriaBase(BaseModel):
    """Fields shared by every criteria variant."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    alias: Optional[str] = None
    heavy: bool = False
    match_value: Any = None
    value_path: list[str] = Field(default_factory=list)
    default_value: Any = UNDEFINED
    criteria_mapper: Optional[Callable[..., Any]] = None
    value_mapper: Optional[Callable[..., Any]] = None

    @field_validator("match_value", mode="before")
    @classmethod
    def parse_path_ref(cls, v: Any) -> Any:
        """Turn ``{"$path": [...]}`` into a PathRef."""
        if isinstance(v, dict) and set(v) == {"$path"}:
            return PathRef.model_validate(v)
        return v

    @field_validator("value_path", mode="before")
    @classmethod
    def split_dotted_path(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [segment for segment in v.split(".") if segment]
        return v


class ArrayCriteria(CriteriaBase):
    type: Literal["ARRAY"]
    operator: ArrayOperator
    normalize: bool = True


class BooleanCriteria(CriteriaBase):
    type: Literal["BOOLEAN"]
    operator: BooleanOperator
    normalize: bool = False
    match_in_array: bool = True


class CustomCriteria(CriteriaBase):
    """Delegates to a predicate ``(match_value, record) -> bool | Awaitable[bool]``.

    When ``predicate`` is omitted, ``match_value`` names a predicate registered
    on the engine.
    """
    type: Literal["CUSTOM"]
    predicate: Optional[Callable[..., Any]] = None


class DateCriteria(CriteriaBase):
    type: Literal["DATE"]
    operator: DateOperator
    match_in_array: bool = True


class GeoCriteria(CriteriaBase):
    """``get_coordinates(value) -> (lat, lng)`` reads points stored in other shapes."""
    type: Literal["GEO"]
    operator: GeoOperator
    get_coordinates: Optional[Callable[..., Any]] = None


class MapCriteria(CriteriaBase):
    type: Literal["MAP"]
    operator: MapOperator
    normalize: bool = True


class NumberCriteria(CriteriaBase):
    type: Literal["NUMBER"]
    operator: NumberOperator
    normalize: bool = False
    match_in_array: bool = True


class ObjectCriteria(CriteriaBase):
    type: Literal["OBJECT"]
    operator: ObjectOperator
    normalize: bool = True


class SetCriteria(CriteriaBase):
    type: Literal["SET"]
    operator: SetOperator
    normalize: bool = True


class StringCriteria(CriteriaBase):
    type: Literal["STRING"]
    operator: StringOperator
    normalize: bool = True
    match_in_array: bool = True


Criteria = Annotated[
    Union[
        ArrayCriteria,
        BooleanCriteria,
        CustomCriteria,
        DateCriteria,
        GeoCriteria,
        MapCriteria,
        NumberCriteria,
        ObjectCriteria,
        SetCriteria,
        StringCriteria,
    ],
    Field(discriminator="type"),
]

CRITERIA_MODELS: dict[str, type[CriteriaBase]] = {
    "ARRAY": ArrayCriteria,
    "BOOLEAN": BooleanCriteria,
    "CUSTOM": CustomCriteria,
    "DATE": DateCriteria,
    "GEO": GeoCriteria,
    "MAP": MapCriteria,
    "NUMBER": NumberCriteria,
    "OBJECT": ObjectCriteria,
    "SET": SetCriteria,
    "STRING": StringCriteria,
}


# =============================================================================
# Filters
# =============================================================================

class Filter(BaseModel):
    """Criteria combined with a logical operator."""
    model_config = ConfigDict(extra="forbid")

    operator: LogicalOperator = LogicalOperator.AND
    criteria: list[Criteria] = Field(default_factory=list)


class FilterGroup(BaseModel):
    """Filters combined with a logical operator."""
    model_config = ConfigDict(extra="forbid")

    operator: LogicalOperator = LogicalOperator.AND
    filters: list[Filter] = Field(default_factory=list)


Expression = Union[CriteriaBase, Filter, FilterGroup]
