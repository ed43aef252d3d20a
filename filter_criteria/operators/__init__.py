"""
Filter Criteria - Operator Predicate Library

One pure module per criteria type, each exposing
``evaluate(value, operator, match_value) -> bool``.
"""

from __future__ import annotations

from typing import Any, Callable

from filter_criteria.core.types import CriteriaType
from filter_criteria.operators import (
    arrays,
    booleans,
    dates,
    geo,
    maps,
    numbers,
    objects,
    sets,
    strings,
)

PREDICATES: dict[CriteriaType, Callable[[Any, str, Any], bool]] = {
    CriteriaType.ARRAY: arrays.evaluate,
    CriteriaType.BOOLEAN: booleans.evaluate,
    CriteriaType.DATE: dates.evaluate,
    CriteriaType.GEO: geo.evaluate,
    CriteriaType.MAP: maps.evaluate,
    CriteriaType.NUMBER: numbers.evaluate,
    CriteriaType.OBJECT: objects.evaluate,
    CriteriaType.SET: sets.evaluate,
    CriteriaType.STRING: strings.evaluate,
}


def evaluate_operator(criteria_type: str, value: Any, operator: str, match_value: Any) -> bool:
    """
    Dispatch to the predicate module for a criteria type.

    Operand combinations a predicate cannot compare evaluate to False.
    """
    predicate = PREDICATES[CriteriaType(criteria_type)]
    try:
        return bool(predicate(value, operator, match_value))
    except (TypeError, ValueError, OverflowError):
        return False


__all__ = [
    "PREDICATES",
    "evaluate_operator",
    "arrays",
    "booleans",
    "dates",
    "geo",
    "maps",
    "numbers",
    "objects",
    "sets",
    "strings",
]
