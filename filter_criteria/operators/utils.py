"""
Filter Criteria - Operator Helpers

Shape checks, deep equality and stringification shared by the predicate
modules.
"""

from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from filter_criteria.core.types import UNDEFINED


def is_number(value: Any) -> bool:
    """int or float, but not bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """list or tuple; strings and bytes are scalars here."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_string_array(value: Any) -> bool:
    return is_sequence(value) and all(isinstance(item, str) for item in value)


def is_number_array(value: Any) -> bool:
    return is_sequence(value) and all(is_number(item) for item in value)


def is_size(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def to_record(value: Any) -> Optional[dict[str, Any]]:
    """
    View a mapping or an attribute-bearing object as a plain dict.

    Returns None for scalars, sequences and sets.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return dict(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if value is None or value is UNDEFINED or is_sequence(value):
        return None
    if isinstance(value, (str, bytes, int, float, bool, Set, Enum, re.Pattern, date)):
        return None
    if hasattr(value, "__dict__") and not callable(value):
        return dict(vars(value))
    return None


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality that keeps booleans apart from numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if set(a.keys()) != set(b.keys()):
            return False
        return all(deep_equal(a[key], b[key]) for key in a)
    if is_sequence(a) and is_sequence(b):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Set) and isinstance(b, Set):
        return a == b
    if type(a) is not type(b) and not (isinstance(a, str) and isinstance(b, str)):
        return False
    return a == b


def strict_equal(a: Any, b: Any) -> bool:
    """Value comparison for scalars, identity comparison for everything else."""
    if is_number(a) and is_number(b):
        return a == b
    scalars = (type(None), bool, str, bytes)
    if isinstance(a, scalars) or isinstance(b, scalars):
        return type(a) is type(b) and a == b
    return a is b


def contains_item(items: Sequence[Any], item: Any) -> bool:
    return any(deep_equal(candidate, item) for candidate in items)


def same_items(left: Sequence[Any], right: Sequence[Any]) -> bool:
    """Multiset equality under deep_equal (order independent)."""
    if len(left) != len(right):
        return False
    remaining = list(left)
    for item in right:
        for index, candidate in enumerate(remaining):
            if deep_equal(candidate, item):
                del remaining[index]
                break
        else:
            return False
    return True


def compare_size(size: int, operator: str, expected: Any) -> bool:
    """Shared SIZE-* semantics for arrays, sets, maps and objects."""
    if not is_size(expected):
        return False
    if operator == "SIZE-EQUALS":
        return size == expected
    if operator == "SIZE-GREATER":
        return size > expected
    if operator == "SIZE-GREATER-OR-EQUALS":
        return size >= expected
    if operator == "SIZE-LESS":
        return size < expected
    if operator == "SIZE-LESS-OR-EQUALS":
        return size <= expected
    return False


_REGEX_FLAGS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def _json_default(value: Any) -> Any:
    if value is UNDEFINED:
        return None
    if isinstance(value, Set):
        return list(value)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, re.Pattern):
        return stringify(value)
    record = to_record(value)
    if record is not None:
        return record
    return str(value)


def stringify(value: Any) -> str:
    """
    String representation used by STRING criteria and result trails.

    Strings pass through, numbers and regular expressions are rendered
    directly, everything else is compact JSON.
    """
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if is_number(value):
        return str(value)
    if isinstance(value, re.Pattern):
        flags = "".join(letter for flag, letter in _REGEX_FLAGS if value.flags & flag)
        return f"/{value.pattern}/{flags}"
    return json.dumps(value, separators=(",", ":"), default=_json_default, ensure_ascii=False)
