"""
Filter Criteria - Shared Type Definitions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Sentinels
# =============================================================================

class _Undefined:
    """Marker for a value that is absent, as opposed to one that is None."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def is_undefined(value: Any) -> bool:
    """Check whether a value is the UNDEFINED marker."""
    return value is UNDEFINED


# =============================================================================
# Enums
# =============================================================================

class LogicalOperator(str, Enum):
    """How sibling results are combined."""
    AND = "AND"
    OR = "OR"


class CriteriaType(str, Enum):
    """Criteria discriminator."""
    ARRAY = "ARRAY"
    BOOLEAN = "BOOLEAN"
    CUSTOM = "CUSTOM"
    DATE = "DATE"
    GEO = "GEO"
    MAP = "MAP"
    NUMBER = "NUMBER"
    OBJECT = "OBJECT"
    SET = "SET"
    STRING = "STRING"


class MatchLevel(str, Enum):
    """Nesting level of an expression or result."""
    CRITERIA = "criteria"
    FILTER = "filter"
    FILTER_GROUP = "filter_group"


class GeoUnit(str, Enum):
    """Distance units for GEO criteria."""
    KM = "km"
    MI = "mi"


class ArrayOperator(str, Enum):
    """ARRAY operators."""
    EXACTLY_MATCHES = "EXACTLY-MATCHES"
    HAS = "HAS"
    INCLUDES_ALL = "INCLUDES-ALL"
    INCLUDES_ANY = "INCLUDES-ANY"
    IS_EMPTY = "IS-EMPTY"
    NOT_EMPTY = "NOT-EMPTY"
    NOT_INCLUDES_ALL = "NOT-INCLUDES-ALL"
    NOT_INCLUDES_ANY = "NOT-INCLUDES-ANY"
    SIZE_EQUALS = "SIZE-EQUALS"
    SIZE_GREATER = "SIZE-GREATER"
    SIZE_GREATER_OR_EQUALS = "SIZE-GREATER-OR-EQUALS"
    SIZE_LESS = "SIZE-LESS"
    SIZE_LESS_OR_EQUALS = "SIZE-LESS-OR-EQUALS"


class BooleanOperator(str, Enum):
    """BOOLEAN operators."""
    EQUALS = "EQUALS"
    IS = "IS"
    IS_FALSE = "IS-FALSE"
    IS_FALSY = "IS-FALSY"
    IS_NOT = "IS-NOT"
    IS_NIL = "IS-NIL"
    IS_NULL = "IS-NULL"
    IS_TRUE = "IS-TRUE"
    IS_TRUTHY = "IS-TRUTHY"
    IS_UNDEFINED = "IS-UNDEFINED"
    NOT_EQUALS = "NOT-EQUALS"
    NOT_NIL = "NOT-NIL"
    NOT_NULL = "NOT-NULL"
    NOT_UNDEFINED = "NOT-UNDEFINED"
    STRICT_EQUAL = "STRICT-EQUAL"
    STRICT_NOT_EQUAL = "STRICT-NOT-EQUAL"


class DateOperator(str, Enum):
    """DATE operators."""
    AFTER = "AFTER"
    AFTER_OR_EQUALS = "AFTER-OR-EQUALS"
    BEFORE = "BEFORE"
    BEFORE_OR_EQUALS = "BEFORE-OR-EQUALS"
    BETWEEN = "BETWEEN"


class GeoOperator(str, Enum):
    """GEO operators."""
    IN_RADIUS = "IN-RADIUS"
    NOT_IN_RADIUS = "NOT-IN-RADIUS"


class MapOperator(str, Enum):
    """MAP operators."""
    CONTAINS = "CONTAINS"
    HAS_KEY = "HAS-KEY"
    HAS_VALUE = "HAS-VALUE"
    IS_EMPTY = "IS-EMPTY"
    NOT_EMPTY = "NOT-EMPTY"
    SIZE_EQUALS = "SIZE-EQUALS"
    SIZE_GREATER = "SIZE-GREATER"
    SIZE_GREATER_OR_EQUALS = "SIZE-GREATER-OR-EQUALS"
    SIZE_LESS = "SIZE-LESS"
    SIZE_LESS_OR_EQUALS = "SIZE-LESS-OR-EQUALS"


class NumberOperator(str, Enum):
    """NUMBER operators."""
    BETWEEN = "BETWEEN"
    EQUALS = "EQUALS"
    GREATER = "GREATER"
    GREATER_OR_EQUALS = "GREATER-OR-EQUALS"
    IN = "IN"
    LESS = "LESS"
    LESS_OR_EQUALS = "LESS-OR-EQUALS"
    NOT_EQUALS = "NOT-EQUALS"


class ObjectOperator(str, Enum):
    """OBJECT operators."""
    CONTAINS = "CONTAINS"
    HAS_KEY = "HAS-KEY"
    HAS_VALUE = "HAS-VALUE"
    IS_EMPTY = "IS-EMPTY"
    NOT_EMPTY = "NOT-EMPTY"
    SIZE_EQUALS = "SIZE-EQUALS"
    SIZE_GREATER = "SIZE-GREATER"
    SIZE_GREATER_OR_EQUALS = "SIZE-GREATER-OR-EQUALS"
    SIZE_LESS = "SIZE-LESS"
    SIZE_LESS_OR_EQUALS = "SIZE-LESS-OR-EQUALS"


class SetOperator(str, Enum):
    """SET operators (same vocabulary as ARRAY)."""
    EXACTLY_MATCHES = "EXACTLY-MATCHES"
    HAS = "HAS"
    INCLUDES_ALL = "INCLUDES-ALL"
    INCLUDES_ANY = "INCLUDES-ANY"
    IS_EMPTY = "IS-EMPTY"
    NOT_EMPTY = "NOT-EMPTY"
    NOT_INCLUDES_ALL = "NOT-INCLUDES-ALL"
    NOT_INCLUDES_ANY = "NOT-INCLUDES-ANY"
    SIZE_EQUALS = "SIZE-EQUALS"
    SIZE_GREATER = "SIZE-GREATER"
    SIZE_GREATER_OR_EQUALS = "SIZE-GREATER-OR-EQUALS"
    SIZE_LESS = "SIZE-LESS"
    SIZE_LESS_OR_EQUALS = "SIZE-LESS-OR-EQUALS"


class StringOperator(str, Enum):
    """STRING operators."""
    CONTAINS = "CONTAINS"
    ENDS_WITH = "ENDS-WITH"
    EQUALS = "EQUALS"
    IN = "IN"
    IS_EMPTY = "IS-EMPTY"
    MATCHES_REGEX = "MATCHES-REGEX"
    NOT_CONTAINS = "NOT-CONTAINS"
    NOT_ENDS_WITH = "NOT-ENDS-WITH"
    NOT_EQUALS = "NOT-EQUALS"
    NOT_IN = "NOT-IN"
    NOT_MATCHES_REGEX = "NOT-MATCHES-REGEX"
    NOT_STARTS_WITH = "NOT-STARTS-WITH"
    STARTS_WITH = "STARTS-WITH"


OPERATORS_BY_TYPE: dict[CriteriaType, type[Enum]] = {
    CriteriaType.ARRAY: ArrayOperator,
    CriteriaType.BOOLEAN: BooleanOperator,
    CriteriaType.DATE: DateOperator,
    CriteriaType.GEO: GeoOperator,
    CriteriaType.MAP: MapOperator,
    CriteriaType.NUMBER: NumberOperator,
    CriteriaType.OBJECT: ObjectOperator,
    CriteriaType.SET: SetOperator,
    CriteriaType.STRING: StringOperator,
}


# =============================================================================
# Callback Types
# =============================================================================

@dataclass(frozen=True)
class CallbackArgs:
    """Argument handed to match-value callbacks, criteria mappers and value mappers."""
    context: Any
    criteria: Any
    value: Any


# =============================================================================
# Result Types
# =============================================================================

class CriteriaResult(BaseModel):
    """Outcome of a single criterion."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    level: MatchLevel = MatchLevel.CRITERIA
    operator: str
    match_value: str
    passed: bool
    reason: str
    value: Any = None


class FilterResult(BaseModel):
    """Outcome of a filter (criteria combined with AND/OR)."""
    model_config = ConfigDict(frozen=True)

    level: MatchLevel = MatchLevel.FILTER
    operator: LogicalOperator
    passed: bool
    reason: str
    results: list[CriteriaResult] = Field(default_factory=list)


class FilterGroupResult(BaseModel):
    """Outcome of a filter group (filters combined with AND/OR)."""
    model_config = ConfigDict(frozen=True)

    level: MatchLevel = MatchLevel.FILTER_GROUP
    operator: LogicalOperator
    passed: bool
    reason: str
    results: list[FilterResult] = Field(default_factory=list)


MatchResult = Union[CriteriaResult, FilterResult, FilterGroupResult]


class ValidationOutcome(BaseModel):
    """Non-throwing validation verdict."""
    valid: bool
    error: Optional[str] = None
