"""
Filter Criteria - NUMBER Operators
"""

from __future__ import annotations

from typing import Any

from filter_criteria.core.types import NumberOperator
from filter_criteria.operators.utils import is_number, is_number_array


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """
    Evaluate a NUMBER operator.

    BETWEEN takes a two-number sequence and is inclusive on both bounds; IN
    takes a number sequence of any length. Every other operator takes a
    single number.
    """
    if not is_number(value):
        return False

    operator = NumberOperator(operator)

    if operator == NumberOperator.BETWEEN:
        if not is_number_array(match_value) or len(match_value) != 2:
            return False
        low, high = match_value
        return low <= value <= high

    if operator == NumberOperator.IN:
        if not is_number_array(match_value):
            return False
        return any(value == candidate for candidate in match_value)

    if not is_number(match_value):
        return False

    if operator == NumberOperator.EQUALS:
        return value == match_value
    elif operator == NumberOperator.NOT_EQUALS:
        return value != match_value
    elif operator == NumberOperator.GREATER:
        return value > match_value
    elif operator == NumberOperator.GREATER_OR_EQUALS:
        return value >= match_value
    elif operator == NumberOperator.LESS:
        return value < match_value
    elif operator == NumberOperator.LESS_OR_EQUALS:
        return value <= match_value

    return False
