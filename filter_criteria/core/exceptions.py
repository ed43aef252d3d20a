"""
Filter Criteria - Custom Exceptions
"""

from typing import Any, Optional


class FilterCriteriaException(Exception):
    """Base exception for all filter criteria errors."""

    def __init__(
        self,
        message: str,
        code: str = "FILTER_CRITERIA_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Exceptions
# =============================================================================

class ValidationError(FilterCriteriaException):
    """Raised when an expression fails schema validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field} if field else {}
        )


# =============================================================================
# Alias Exceptions
# =============================================================================

class AliasError(FilterCriteriaException):
    """Base exception for alias registry errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="ALIAS_ERROR", details=details)


class AliasNotFoundError(AliasError):
    """Raised when an expression references an alias that was never saved."""

    def __init__(self, alias: str):
        super().__init__(
            message=f'Alias "{alias}" not found',
            details={"alias": alias}
        )


class InvalidAliasError(AliasError):
    """Raised when saving a criterion without a usable alias."""
    pass


# =============================================================================
# Custom Predicate Exceptions
# =============================================================================

class CustomPredicateError(FilterCriteriaException):
    """Raised when a custom predicate cannot be registered."""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(
            message=message,
            code="CUSTOM_PREDICATE_ERROR",
            details={"name": name} if name else {}
        )
