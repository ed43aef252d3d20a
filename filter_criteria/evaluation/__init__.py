"""
Filter Criteria - Evaluation Module
"""

from __future__ import annotations

from filter_criteria.evaluation.normalize import TextNormalizer, normalize, normalize_text, deburr
from filter_criteria.evaluation.path import ResolvedValue, resolve_path
from filter_criteria.evaluation.criteria import CriteriaEvaluator, maybe_await
from filter_criteria.evaluation.filters import (
    FilterEvaluator,
    to_filter_group,
    unwrap_result,
    active_filters,
)
from filter_criteria.evaluation.aliases import AliasRegistry
from filter_criteria.evaluation.engine import FilterEngine

__all__ = [
    "TextNormalizer",
    "normalize",
    "normalize_text",
    "deburr",
    "ResolvedValue",
    "resolve_path",
    "CriteriaEvaluator",
    "maybe_await",
    "FilterEvaluator",
    "to_filter_group",
    "unwrap_result",
    "active_filters",
    "AliasRegistry",
    "FilterEngine",
]
