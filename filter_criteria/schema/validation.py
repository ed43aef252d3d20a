"""
Filter Criteria - Expression Validation

Validates raw (untyped) expressions into typed models, filling in per-type
defaults and rejecting operator/type mismatches.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from filter_criteria.core.exceptions import ValidationError
from filter_criteria.core.types import MatchLevel
from filter_criteria.schema.models import (
    Criteria,
    CriteriaBase,
    Expression,
    Filter,
    FilterGroup,
)

_criteria_adapter: TypeAdapter = TypeAdapter(Criteria)


def detect_level(expression: Any) -> MatchLevel:
    """Tell whether an expression is a criterion, a filter or a filter group."""
    if isinstance(expression, FilterGroup):
        return MatchLevel.FILTER_GROUP
    if isinstance(expression, Filter):
        return MatchLevel.FILTER
    if isinstance(expression, CriteriaBase):
        return MatchLevel.CRITERIA
    if isinstance(expression, Mapping):
        if "filters" in expression:
            return MatchLevel.FILTER_GROUP
        if "criteria" in expression:
            return MatchLevel.FILTER
        return MatchLevel.CRITERIA
    raise ValidationError(
        f"Expression must be a mapping or a model, got {type(expression).__name__}"
    )


def _wrap(error: PydanticValidationError) -> ValidationError:
    first = error.errors()[0] if error.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    return ValidationError(str(error), field=field)


def validate_criteria(raw: Any) -> CriteriaBase:
    """Validate a single criterion."""
    try:
        return _criteria_adapter.validate_python(raw)
    except PydanticValidationError as e:
        raise _wrap(e) from e


def validate_filter(raw: Any) -> Filter:
    """Validate a filter (criteria combined with AND/OR)."""
    try:
        return Filter.model_validate(raw)
    except PydanticValidationError as e:
        raise _wrap(e) from e


def validate_filter_group(raw: Any) -> FilterGroup:
    """Validate a filter group (filters combined with AND/OR)."""
    try:
        return FilterGroup.model_validate(raw)
    except PydanticValidationError as e:
        raise _wrap(e) from e


def validate_expression(raw: Any) -> Expression:
    """
    Validate a criterion, filter or filter group.

    Args:
        raw: Mapping or already-validated model

    Returns:
        The typed model at the same nesting level as the input

    Raises:
        ValidationError: If the expression is malformed
    """
    level = detect_level(raw)
    if level == MatchLevel.FILTER_GROUP:
        return validate_filter_group(raw)
    if level == MatchLevel.FILTER:
        return validate_filter(raw)
    return validate_criteria(raw)


def criteria_fields(criteria: BaseModel) -> dict[str, Any]:
    """Field-name mapping of a validated criterion, suitable for re-validation."""
    return {name: getattr(criteria, name) for name in type(criteria).model_fields}
