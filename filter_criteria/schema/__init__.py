"""
Filter Criteria - Schema Module
"""

from __future__ import annotations

from filter_criteria.schema.models import (
    PathRef,
    CriteriaBase,
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
    Criteria,
    CRITERIA_MODELS,
    Filter,
    FilterGroup,
    Expression,
)
from filter_criteria.schema.validation import (
    detect_level,
    validate_criteria,
    validate_filter,
    validate_filter_group,
    validate_expression,
    criteria_fields,
)

__all__ = [
    "PathRef",
    "CriteriaBase",
    "ArrayCriteria",
    "BooleanCriteria",
    "CustomCriteria",
    "DateCriteria",
    "GeoCriteria",
    "MapCriteria",
    "NumberCriteria",
    "ObjectCriteria",
    "SetCriteria",
    "StringCriteria",
    "Criteria",
    "CRITERIA_MODELS",
    "Filter",
    "FilterGroup",
    "Expression",
    "detect_level",
    "validate_criteria",
    "validate_filter",
    "validate_filter_group",
    "validate_expression",
    "criteria_fields",
]
