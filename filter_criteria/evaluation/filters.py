"""
Filter Criteria - Filter & Filter Group Evaluator

Combines criteria into filters and filters into groups with AND/OR logic.

- AND filters run their light criteria first; heavy criteria only run when
  every light one passed.
- AND groups evaluate filters one by one and stop at the first failure.
- OR filters/groups and plain AND filters launch siblings concurrently.

Result lists always follow declaration order.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Sequence

from filter_criteria.core.logging import LoggerMixin
from filter_criteria.core.types import (
    CriteriaResult,
    FilterGroupResult,
    FilterResult,
    LogicalOperator,
    MatchLevel,
    MatchResult,
)
from filter_criteria.evaluation.criteria import CriteriaEvaluator
from filter_criteria.schema.models import CriteriaBase, Expression, Filter, FilterGroup


def to_filter_group(expression: Expression) -> tuple[FilterGroup, MatchLevel]:
    """
    Wrap a validated criterion or filter into a filter group.

    Returns:
        (group, original level) so results can be unwrapped afterwards
    """
    if isinstance(expression, FilterGroup):
        return expression, MatchLevel.FILTER_GROUP
    if isinstance(expression, Filter):
        return FilterGroup(operator=LogicalOperator.AND, filters=[expression]), MatchLevel.FILTER
    return (
        FilterGroup(
            operator=LogicalOperator.AND,
            filters=[Filter(operator=LogicalOperator.AND, criteria=[expression])],
        ),
        MatchLevel.CRITERIA,
    )


def active_filters(group: FilterGroup) -> list[Filter]:
    """Filters with at least one criterion; empty ones are vacuous."""
    return [f for f in group.filters if f.criteria]


def filter_reason(operator: LogicalOperator, passed: bool, suffix: str = "") -> str:
    reason = f'Filter "{operator.value}" check {"PASSED" if passed else "FAILED"}'
    return f"{reason} {suffix}" if suffix else reason


def group_reason(operator: LogicalOperator, passed: bool, suffix: str = "") -> str:
    reason = f'Filter group "{operator.value}" check {"PASSED" if passed else "FAILED"}'
    return f"{reason} {suffix}" if suffix else reason


def unwrap_result(result: FilterGroupResult, group: FilterGroup, level: MatchLevel) -> MatchResult:
    """Return the result at the nesting level of the caller's input."""
    if level == MatchLevel.FILTER_GROUP:
        return result

    if not result.results:
        # The single filter was vacuous and got dropped
        operator = group.filters[0].operator if group.filters else LogicalOperator.AND
        return FilterResult(operator=operator, passed=True, reason=filter_reason(operator, True))

    filter_result = result.results[0]
    if level == MatchLevel.FILTER:
        return filter_result
    return filter_result.results[0]


class FilterEvaluator(LoggerMixin):
    """Evaluates filters and filter groups against records."""

    def __init__(self, criteria_evaluator: Optional[CriteriaEvaluator] = None):
        self.criteria_evaluator = criteria_evaluator or CriteriaEvaluator()

    async def _evaluate_all(
        self,
        record: Any,
        criteria: Sequence[CriteriaBase],
        context: Any,
    ) -> list[CriteriaResult]:
        tasks = [self.criteria_evaluator.evaluate(record, c, context) for c in criteria]
        return list(await asyncio.gather(*tasks))

    async def evaluate_filter(
        self,
        record: Any,
        filter_: Filter,
        context: Any = None,
    ) -> FilterResult:
        """
        Evaluate a filter.

        Args:
            record: Item being filtered
            filter_: Validated filter
            context: Caller-supplied value handed to callbacks

        Returns:
            FilterResult with one entry per evaluated criterion
        """
        operator = filter_.operator
        criteria = filter_.criteria

        if not criteria:
            return FilterResult(operator=operator, passed=True, reason=filter_reason(operator, True))

        if operator == LogicalOperator.AND and len(criteria) > 1:
            light = [(i, c) for i, c in enumerate(criteria) if not c.heavy]
            heavy = [(i, c) for i, c in enumerate(criteria) if c.heavy]

            if light and heavy:
                light_results = await self._evaluate_all(record, [c for _, c in light], context)

                if not all(r.passed for r in light_results):
                    self.logger.debug("Heavy criteria skipped", heavy=len(heavy))
                    return FilterResult(
                        operator=operator,
                        passed=False,
                        reason=filter_reason(operator, False, "(heavy criteria skipped)"),
                        results=light_results,
                    )

                heavy_results = await self._evaluate_all(record, [c for _, c in heavy], context)

                merged: list[Optional[CriteriaResult]] = [None] * len(criteria)
                for (index, _), result in zip(light + heavy, light_results + heavy_results):
                    merged[index] = result

                passed = all(r.passed for r in heavy_results)
                return FilterResult(
                    operator=operator,
                    passed=passed,
                    reason=filter_reason(operator, passed),
                    results=merged,
                )

        results = await self._evaluate_all(record, criteria, context)

        if operator == LogicalOperator.AND:
            passed = all(r.passed for r in results)
        else:
            passed = any(r.passed for r in results)

        return FilterResult(
            operator=operator,
            passed=passed,
            reason=filter_reason(operator, passed),
            results=results,
        )

    async def evaluate_group(
        self,
        record: Any,
        group: FilterGroup,
        context: Any = None,
    ) -> FilterGroupResult:
        """
        Evaluate a filter group.

        Empty filters are dropped first; a group left with no filters passes.
        """
        operator = group.operator
        filters = active_filters(group)

        if not filters:
            return FilterGroupResult(operator=operator, passed=True, reason=group_reason(operator, True))

        if operator == LogicalOperator.AND and len(filters) > 1:
            results: list[FilterResult] = []

            for filter_ in filters:
                result = await self.evaluate_filter(record, filter_, context)
                results.append(result)

                if not result.passed:
                    skipped = len(filters) - len(results)
                    if skipped:
                        self.logger.debug("Filter group short-circuited", skipped=skipped)
                    return FilterGroupResult(
                        operator=operator,
                        passed=False,
                        reason=group_reason(operator, False, "(short-circuited)" if skipped else ""),
                        results=results,
                    )

            return FilterGroupResult(
                operator=operator,
                passed=True,
                reason=group_reason(operator, True),
                results=results,
            )

        tasks = [self.evaluate_filter(record, f, context) for f in filters]
        results = list(await asyncio.gather(*tasks))

        if operator == LogicalOperator.AND:
            passed = all(r.passed for r in results)
        else:
            passed = any(r.passed for r in results)

        return FilterGroupResult(
            operator=operator,
            passed=passed,
            reason=group_reason(operator, passed),
            results=results,
        )
