"""
Filter Criteria - STRING Operators

The value is stringified before any operator runs, so numbers, regular
expressions and containers can be matched as text.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from filter_criteria.core.types import StringOperator
from filter_criteria.operators.utils import is_string_array, stringify


def _compile(pattern: Any) -> Optional[re.Pattern]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        try:
            return re.compile(pattern)
        except re.error:
            return None
    return None


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """Evaluate a STRING operator."""
    text = stringify(value)
    operator = StringOperator(operator)

    if operator == StringOperator.IS_EMPTY:
        return text == ""

    if operator in (StringOperator.MATCHES_REGEX, StringOperator.NOT_MATCHES_REGEX):
        pattern = _compile(match_value)
        if pattern is None:
            return False
        found = pattern.search(text) is not None
        return found if operator == StringOperator.MATCHES_REGEX else not found

    if operator in (StringOperator.IN, StringOperator.NOT_IN):
        if not is_string_array(match_value):
            return False
        found = text in match_value
        return found if operator == StringOperator.IN else not found

    if not isinstance(match_value, str):
        return False

    if operator == StringOperator.CONTAINS:
        return match_value in text
    elif operator == StringOperator.NOT_CONTAINS:
        return match_value not in text
    elif operator == StringOperator.STARTS_WITH:
        return text.startswith(match_value)
    elif operator == StringOperator.NOT_STARTS_WITH:
        return not text.startswith(match_value)
    elif operator == StringOperator.ENDS_WITH:
        return text.endswith(match_value)
    elif operator == StringOperator.NOT_ENDS_WITH:
        return not text.endswith(match_value)
    elif operator == StringOperator.EQUALS:
        return text == match_value
    elif operator == StringOperator.NOT_EQUALS:
        return text != match_value

    return False
