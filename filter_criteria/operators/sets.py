"""
Filter Criteria - SET Operators

Sets reuse the ARRAY semantics after conversion to a list.
"""

from __future__ import annotations

from collections.abc import Set
from typing import Any

from filter_criteria.core.types import ArrayOperator, SetOperator
from filter_criteria.operators import arrays


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """Evaluate a SET operator; the value must be a set or frozenset."""
    if not isinstance(value, Set):
        return False

    if isinstance(match_value, Set):
        match_value = list(match_value)

    return arrays.evaluate(list(value), ArrayOperator(SetOperator(operator).value), match_value)
