"""
Filter Criteria - DATE Operators

Operands are ISO-8601 strings (or datetime/date objects) compared as
instants. Naive values are taken as UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from filter_criteria.core.types import DateOperator
from filter_criteria.operators.utils import is_sequence


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date-like value into an aware datetime, or None if it is not one."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _bounds(match_value: Any) -> Optional[tuple[datetime, datetime]]:
    """A single bound is paired with "now" as the upper bound."""
    if is_sequence(match_value):
        if len(match_value) != 2:
            return None
        start, end = parse_date(match_value[0]), parse_date(match_value[1])
    else:
        start, end = parse_date(match_value), datetime.now(timezone.utc)

    if start is None or end is None:
        return None
    return start, end


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """Evaluate a DATE operator."""
    instant = parse_date(value)
    bounds = _bounds(match_value)
    if instant is None or bounds is None:
        return False

    start, end = bounds
    operator = DateOperator(operator)

    if operator == DateOperator.AFTER:
        return instant > start
    elif operator == DateOperator.AFTER_OR_EQUALS:
        return instant >= start
    elif operator == DateOperator.BEFORE:
        return instant < start
    elif operator == DateOperator.BEFORE_OR_EQUALS:
        return instant <= start
    elif operator == DateOperator.BETWEEN:
        return start <= instant <= end

    return False
