"""
Filter Criteria - Engine

Public entry point: resolves aliases, validates expressions, evaluates them
against single records or whole collections, and offers introspection.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Iterable, Optional, TypeVar, Union

from filter_criteria.core.config import settings
from filter_criteria.core.exceptions import CustomPredicateError, FilterCriteriaException
from filter_criteria.core.logging import LoggerMixin
from filter_criteria.core.types import (
    OPERATORS_BY_TYPE,
    CriteriaType,
    MatchLevel,
    MatchResult,
    ValidationOutcome,
)
from filter_criteria.evaluation.aliases import AliasRegistry
from filter_criteria.evaluation.criteria import CriteriaEvaluator, CustomPredicate
from filter_criteria.evaluation.filters import (
    FilterEvaluator,
    active_filters,
    to_filter_group,
    unwrap_result,
)
from filter_criteria.evaluation.normalize import TextNormalizer
from filter_criteria.schema.models import CriteriaBase, FilterGroup
from filter_criteria.schema.validation import validate_expression

T = TypeVar("T")
R = TypeVar("R")


class FilterEngine(LoggerMixin):
    """
    Evaluates filter expressions against in-memory records.

    Expressions may be a criterion, a filter (criteria + AND/OR) or a filter
    group (filters + AND/OR), given as mappings or validated models.

    Example:
        engine = FilterEngine()
        adults = await engine.filter_collection(users, {
            "type": "NUMBER",
            "operator": "GREATER-OR-EQUALS",
            "valuePath": ["age"],
            "matchValue": 18,
        })
    """

    def __init__(
        self,
        concurrency: Optional[int] = None,
        normalizer: Optional[TextNormalizer] = None,
        aliases: Optional[AliasRegistry] = None,
    ):
        """
        Initialize the engine.

        Args:
            concurrency: Default bound for batch filtering (None or 0 = unbounded)
            normalizer: Normalizer with its own cache; a fresh one by default
            aliases: Alias registry; a fresh, unshared one by default
        """
        self.concurrency = concurrency if concurrency is not None else settings.DEFAULT_CONCURRENCY
        self.normalizer = normalizer or TextNormalizer()
        self.aliases = aliases if aliases is not None else AliasRegistry()
        self.custom_predicates: dict[str, CustomPredicate] = {}
        self.criteria_evaluator = CriteriaEvaluator(self.normalizer, self.custom_predicates)
        self.filter_evaluator = FilterEvaluator(self.criteria_evaluator)

    # -------------------------------------------------------------------------
    # Preparation
    # -------------------------------------------------------------------------

    def prepare(self, expression: Any) -> tuple[FilterGroup, MatchLevel]:
        """
        Resolve aliases, validate, and canonicalize into a filter group.

        Raises:
            AliasNotFoundError: If an unknown alias is referenced
            ValidationError: If the expression is malformed
        """
        resolved = self.aliases.resolve_expression(expression)
        return to_filter_group(validate_expression(resolved))

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    async def evaluate(self, record: Any, expression: Any, context: Any = None) -> MatchResult:
        """
        Evaluate an expression against one record.

        Args:
            record: Item to test
            expression: Criterion, filter or filter group
            context: Value handed to match-value callbacks and mappers

        Returns:
            Result at the same nesting level as ``expression``
        """
        group, level = self.prepare(expression)
        result = await self.filter_evaluator.evaluate_group(record, group, context)
        self.logger.debug("Record evaluated", match_level=level.value, passed=result.passed)
        return unwrap_result(result, group, level)

    async def matches(self, record: Any, expression: Any, context: Any = None) -> bool:
        """Verdict only."""
        result = await self.evaluate(record, expression, context)
        return result.passed

    async def filter_collection(
        self,
        records: Iterable[T],
        expression: Any,
        concurrency: Optional[int] = None,
        context: Any = None,
    ) -> list[T]:
        """
        Keep the records that pass an expression, in their original order.

        An empty expression returns the input unchanged.
        """
        start_time = time.time()
        records = list(records)
        group, _ = self.prepare(expression)

        if not active_filters(group):
            return records

        verdicts = await self._map_bounded(
            records,
            lambda record: self.filter_evaluator.evaluate_group(record, group, context),
            concurrency,
        )
        passed = [record for record, verdict in zip(records, verdicts) if verdict.passed]

        self.logger.info(
            "Collection filtered",
            records=len(records),
            passed=len(passed),
            concurrency=self._limit(concurrency),
            latency_ms=round((time.time() - start_time) * 1000, 2),
        )
        return passed

    async def filter_collection_multiple(
        self,
        records: Iterable[T],
        expressions: Mapping[str, Any],
        concurrency: Optional[int] = None,
        context: Any = None,
    ) -> dict[str, list[T]]:
        """
        Partition one collection by several expressions in a single pass.

        Each record is evaluated against every expression once; empty
        expressions keep every record.

        Returns:
            Mapping from each expression key to the records that passed it
        """
        start_time = time.time()
        records = list(records)
        groups = {key: self.prepare(expression)[0] for key, expression in expressions.items()}

        async def evaluate_all(record: T) -> dict[str, bool]:
            keys = list(groups)
            results = await asyncio.gather(*(
                self.filter_evaluator.evaluate_group(record, groups[key], context)
                for key in keys
            ))
            return {key: result.passed for key, result in zip(keys, results)}

        verdicts = await self._map_bounded(records, evaluate_all, concurrency)
        partitions: dict[str, list[T]] = {key: [] for key in groups}
        for record, verdict in zip(records, verdicts):
            for key, passed in verdict.items():
                if passed:
                    partitions[key].append(record)

        self.logger.info(
            "Collection partitioned",
            records=len(records),
            expressions=len(groups),
            concurrency=self._limit(concurrency),
            latency_ms=round((time.time() - start_time) * 1000, 2),
        )
        return partitions

    def _limit(self, concurrency: Optional[int]) -> Optional[int]:
        limit = concurrency if concurrency is not None else self.concurrency
        return limit or None

    async def _map_bounded(
        self,
        items: list[T],
        fn: Callable[[T], Awaitable[R]],
        concurrency: Optional[int],
    ) -> list[R]:
        limit = self._limit(concurrency)
        if limit is None:
            return list(await asyncio.gather(*(fn(item) for item in items)))

        semaphore = asyncio.Semaphore(limit)

        async def run(item: T) -> R:
            async with semaphore:
                return await fn(item)

        return list(await asyncio.gather(*(run(item) for item in items)))

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def count_active_filters(self, expression: Any) -> int:
        """Number of filters holding at least one criterion."""
        group, _ = self.prepare(expression)
        return len(active_filters(group))

    def is_empty(self, expression: Any) -> bool:
        """True when the expression has no criteria at all."""
        return self.count_active_filters(expression) == 0

    def validate_expression(self, expression: Any) -> ValidationOutcome:
        """Non-throwing validation, alias resolution included."""
        try:
            self.prepare(expression)
        except FilterCriteriaException as e:
            return ValidationOutcome(valid=False, error=e.message)
        return ValidationOutcome(valid=True)

    # -------------------------------------------------------------------------
    # Aliases & custom predicates
    # -------------------------------------------------------------------------

    def save_criteria(self, criteria: Union[CriteriaBase, Mapping[str, Any]]) -> CriteriaBase:
        """Validate and save a criterion under its alias."""
        return self.aliases.save(criteria)

    def register_custom_predicate(self, name: str, predicate: CustomPredicate) -> None:
        """
        Register a predicate CUSTOM criteria can refer to by name.

        Raises:
            CustomPredicateError: If the name is empty or the predicate is not callable
        """
        if not name:
            raise CustomPredicateError("Custom predicate name must not be empty")
        if not callable(predicate):
            raise CustomPredicateError(f'Custom predicate "{name}" is not callable', name=name)

        self.custom_predicates[name] = predicate
        self.logger.info("Custom predicate registered", name=name)

    def unregister_custom_predicate(self, name: str) -> bool:
        """Remove a named predicate. Returns False if it was not registered."""
        if self.custom_predicates.pop(name, None) is None:
            return False
        self.logger.info("Custom predicate unregistered", name=name)
        return True

    def inspect(self) -> str:
        """Human-readable dump of the operator vocabulary, predicates and aliases."""
        lines = ["Operators:"]
        for criteria_type in CriteriaType:
            operators = OPERATORS_BY_TYPE.get(criteria_type)
            names = ", ".join(op.value for op in operators) if operators else "<predicate>"
            lines.append(f"  {criteria_type.value}: {names}")

        lines.append("Custom predicates:")
        if self.custom_predicates:
            lines.extend(f"  {name}" for name in self.custom_predicates)
        else:
            lines.append("  (none)")

        lines.append("Saved aliases:")
        if len(self.aliases):
            for alias in self.aliases.aliases():
                criteria = self.aliases.get(alias)
                operator = getattr(criteria, "operator", None)
                path = ".".join(criteria.value_path) or "<record>"
                description = f"{criteria.type} {operator.value}" if operator is not None else criteria.type
                lines.append(f"  {alias}: {description} @ {path}")
        else:
            lines.append("  (none)")

        return "\n".join(lines)
