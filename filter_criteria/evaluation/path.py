"""
Filter Criteria - Path Resolver

Extracts the value a criterion looks at. Walking through a sequence in the
middle of a path fans out over its items ("array branching"): the rest of
the path is applied to every item and the results are flattened one level.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from filter_criteria.core.types import UNDEFINED
from filter_criteria.operators.utils import is_sequence


@dataclass(frozen=True)
class ResolvedValue:
    """Result of resolving a path against a record."""
    value: Any
    array_branching: bool = False


def lookup(container: Any, segment: str) -> tuple[bool, Any]:
    """
    Read one segment from a mapping or an attribute-bearing object.

    Returns:
        (found, value); None is treated as a dead end, like a missing key.
        Private attributes and callables are never found on objects.
    """
    if container is None or container is UNDEFINED:
        return False, UNDEFINED
    if isinstance(container, Mapping):
        if segment in container:
            return True, container[segment]
        return False, UNDEFINED
    if isinstance(container, (str, bytes, int, float, bool)) or segment.startswith("_"):
        return False, UNDEFINED
    try:
        child = getattr(container, segment)
    except AttributeError:
        return False, UNDEFINED
    # Methods are not data
    if callable(child):
        return False, UNDEFINED
    return True, child


def resolve_path(
    value: Any,
    path: Sequence[str],
    default_value: Any = UNDEFINED,
) -> ResolvedValue:
    """
    Resolve ``path`` against ``value``.

    Before any branching, a missing segment yields ``default_value``. Once
    branching has begun, a missing segment contributes nothing, so an empty
    branch does not poison its siblings.

    Args:
        value: Record (or any nested value) to read from
        path: Field-name segments, left to right
        default_value: Returned when the path is absent before branching

    Returns:
        ResolvedValue with the extracted value; a list when branching occurred
    """
    if not path:
        return ResolvedValue(value=value)

    depth_limit = len(path)
    branching = False
    collected: list[Any] = []
    # Worklist of (current value, index of the next segment); popped LIFO,
    # so items are pushed in reverse to keep declaration order.
    stack: list[tuple[Any, int]] = [(value, 0)]

    while stack:
        current, depth = stack.pop()

        if depth == depth_limit:
            if not branching:
                return ResolvedValue(value=current)
            if is_sequence(current):
                collected.extend(current)
            else:
                collected.append(current)
            continue

        if is_sequence(current):
            branching = True
            stack.extend((item, depth) for item in reversed(current))
            continue

        found, child = lookup(current, path[depth])
        if not found:
            if not branching:
                return ResolvedValue(value=default_value)
            continue

        stack.append((child, depth + 1))

    return ResolvedValue(value=collected, array_branching=True)
