"""
Filter Criteria - MAP Operators

Mirrors OBJECT semantics over native mapping keys and values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from filter_criteria.core.types import MapOperator
from filter_criteria.operators.objects import evaluate_record


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """Evaluate a MAP operator; the value must be a mapping."""
    if not isinstance(value, Mapping):
        return False
    return evaluate_record(dict(value), MapOperator(operator).value, match_value)
