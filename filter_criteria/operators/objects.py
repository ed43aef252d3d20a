"""
Filter Criteria - OBJECT Operators

Records are mappings or attribute-bearing objects (dataclasses, pydantic
models, plain instances).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from filter_criteria.core.types import ObjectOperator
from filter_criteria.operators.utils import (
    compare_size,
    deep_equal,
    is_sequence,
    to_record,
)


def matches(value: Any, pattern: Any) -> bool:
    """
    Recursive sub-object match.

    Every key of a mapping pattern must be present with a matching value;
    every item of a sequence pattern must match some item of the value's
    sequence; anything else is compared with deep equality.
    """
    if isinstance(pattern, Mapping):
        record = to_record(value)
        if record is None:
            return False
        return all(
            key in record and matches(record[key], sub_pattern)
            for key, sub_pattern in pattern.items()
        )

    if is_sequence(pattern):
        if not is_sequence(value):
            return False
        return all(
            any(matches(candidate, item) for candidate in value)
            for item in pattern
        )

    return deep_equal(value, pattern)


def evaluate_record(record: dict[str, Any], operator: str, match_value: Any) -> bool:
    """Operators shared by OBJECT and MAP once the value is a plain dict."""
    if operator.startswith("SIZE-"):
        return compare_size(len(record), operator, match_value)

    if operator == "CONTAINS":
        if not isinstance(match_value, Mapping):
            return False
        return matches(record, match_value)
    elif operator == "HAS-KEY":
        try:
            return match_value in record
        except TypeError:
            return False
    elif operator == "HAS-VALUE":
        return any(deep_equal(item, match_value) for item in record.values())
    elif operator == "IS-EMPTY":
        return len(record) == 0
    elif operator == "NOT-EMPTY":
        return len(record) > 0

    return False


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """Evaluate an OBJECT operator."""
    record = to_record(value)
    if record is None:
        return False
    return evaluate_record(record, ObjectOperator(operator).value, match_value)
