"""
Filter Criteria - ARRAY Operators
"""

from __future__ import annotations

from typing import Any, Callable

from filter_criteria.core.types import ArrayOperator
from filter_criteria.operators.utils import (
    compare_size,
    contains_item,
    is_sequence,
    same_items,
)


def _includes_all(value: list, match: list) -> bool:
    return all(contains_item(value, item) for item in match)


def _includes_any(value: list, match: list) -> bool:
    return any(contains_item(value, item) for item in match)


def _any_operand(_: Any) -> bool:
    return True


# For each operator: (handler, operand check)
_OPS: dict[ArrayOperator, tuple[Callable[[list, Any], bool], Callable[[Any], bool]]] = {
    ArrayOperator.EXACTLY_MATCHES: (same_items, is_sequence),
    ArrayOperator.HAS: (contains_item, _any_operand),
    ArrayOperator.INCLUDES_ALL: (_includes_all, is_sequence),
    ArrayOperator.INCLUDES_ANY: (_includes_any, is_sequence),
    ArrayOperator.IS_EMPTY: (lambda value, _: len(value) == 0, _any_operand),
    ArrayOperator.NOT_EMPTY: (lambda value, _: len(value) > 0, _any_operand),
    ArrayOperator.NOT_INCLUDES_ALL: (lambda value, match: not _includes_all(value, match), is_sequence),
    ArrayOperator.NOT_INCLUDES_ANY: (lambda value, match: not _includes_any(value, match), is_sequence),
}


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """
    Evaluate an ARRAY operator.

    Args:
        value: Resolved record value, must be a list or tuple
        operator: ArrayOperator value
        match_value: Operand (list for inclusion operators, int for SIZE-*)

    Returns:
        True if the predicate holds; False for any operand-shape mismatch
    """
    if not is_sequence(value):
        return False

    operator = ArrayOperator(operator)
    if operator.value.startswith("SIZE-"):
        return compare_size(len(value), operator.value, match_value)

    handler, operand_check = _OPS[operator]
    if not operand_check(match_value):
        return False
    return handler(list(value), match_value)
