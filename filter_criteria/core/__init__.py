"""
Filter Criteria - Core Module

This module provides core functionality used throughout the engine:
- Configuration management
- Logging
- Custom exceptions
- Shared type definitions
"""

from filter_criteria.core.config import Settings, get_settings, settings
from filter_criteria.core.exceptions import (
    FilterCriteriaException,
    ValidationError,
    AliasError,
    AliasNotFoundError,
    InvalidAliasError,
    CustomPredicateError,
)
from filter_criteria.core.logging import get_logger, setup_logging, LoggerMixin
from filter_criteria.core.types import (
    # Sentinels
    UNDEFINED,
    is_undefined,
    # Enums
    LogicalOperator,
    CriteriaType,
    MatchLevel,
    GeoUnit,
    ArrayOperator,
    BooleanOperator,
    DateOperator,
    GeoOperator,
    MapOperator,
    NumberOperator,
    ObjectOperator,
    SetOperator,
    StringOperator,
    OPERATORS_BY_TYPE,
    # Callback types
    CallbackArgs,
    # Result types
    CriteriaResult,
    FilterResult,
    FilterGroupResult,
    MatchResult,
    ValidationOutcome,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "settings",
    # Logging
    "get_logger",
    "setup_logging",
    "LoggerMixin",
    # Exceptions
    "FilterCriteriaException",
    "ValidationError",
    "AliasError",
    "AliasNotFoundError",
    "InvalidAliasError",
    "CustomPredicateError",
    # Sentinels
    "UNDEFINED",
    "is_undefined",
    # Enums
    "LogicalOperator",
    "CriteriaType",
    "MatchLevel",
    "GeoUnit",
    "ArrayOperator",
    "BooleanOperator",
    "DateOperator",
    "GeoOperator",
    "MapOperator",
    "NumberOperator",
    "ObjectOperator",
    "SetOperator",
    "StringOperator",
    "OPERATORS_BY_TYPE",
    # Callback types
    "CallbackArgs",
    # Result types
    "CriteriaResult",
    "FilterResult",
    "FilterGroupResult",
    "MatchResult",
    "ValidationOutcome",
]
