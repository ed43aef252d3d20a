"""
Filter Criteria - BOOLEAN Operators

Equality and presence checks. Absence is represented by UNDEFINED, which is
distinct from None.
"""

from __future__ import annotations

from typing import Any, Callable

from filter_criteria.core.types import UNDEFINED, BooleanOperator
from filter_criteria.operators.utils import deep_equal, strict_equal


def _is_nil(value: Any) -> bool:
    return value is None or value is UNDEFINED


_OPS: dict[BooleanOperator, Callable[[Any, Any], bool]] = {
    BooleanOperator.EQUALS: deep_equal,
    BooleanOperator.NOT_EQUALS: lambda value, match: not deep_equal(value, match),
    BooleanOperator.IS_TRUE: lambda value, _: value is True,
    BooleanOperator.IS_FALSE: lambda value, _: value is False,
    BooleanOperator.IS_TRUTHY: lambda value, _: bool(value),
    BooleanOperator.IS_FALSY: lambda value, _: not value,
    BooleanOperator.IS: strict_equal,
    BooleanOperator.IS_NOT: lambda value, match: not strict_equal(value, match),
    BooleanOperator.IS_NIL: lambda value, _: _is_nil(value),
    BooleanOperator.NOT_NIL: lambda value, _: not _is_nil(value),
    BooleanOperator.IS_NULL: lambda value, _: value is None,
    BooleanOperator.NOT_NULL: lambda value, _: value is not None,
    BooleanOperator.IS_UNDEFINED: lambda value, _: value is UNDEFINED,
    BooleanOperator.NOT_UNDEFINED: lambda value, _: value is not UNDEFINED,
    BooleanOperator.STRICT_EQUAL: strict_equal,
    BooleanOperator.STRICT_NOT_EQUAL: lambda value, match: not strict_equal(value, match),
}


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """Evaluate a BOOLEAN operator."""
    return _OPS[BooleanOperator(operator)](value, match_value)
