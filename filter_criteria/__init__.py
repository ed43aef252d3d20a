"""
Filter Criteria

Evaluates structured boolean filter expressions (criteria, filters and
filter groups) against arbitrary in-memory records.
"""

from filter_criteria.core import (
    UNDEFINED,
    CriteriaResult,
    FilterResult,
    FilterGroupResult,
    ValidationOutcome,
    FilterCriteriaException,
    ValidationError,
    AliasNotFoundError,
)
from filter_criteria.evaluation import FilterEngine, normalize, normalize_text, resolve_path
from filter_criteria.schema import Filter, FilterGroup, validate_expression

__version__ = "0.1.0"

__all__ = [
    "FilterEngine",
    "Filter",
    "FilterGroup",
    "validate_expression",
    "normalize",
    "normalize_text",
    "resolve_path",
    "UNDEFINED",
    "CriteriaResult",
    "FilterResult",
    "FilterGroupResult",
    "ValidationOutcome",
    "FilterCriteriaException",
    "ValidationError",
    "AliasNotFoundError",
]
