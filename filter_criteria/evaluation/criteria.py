"""
Filter Criteria - Criteria Evaluator

Resolves one criterion against one record: dynamic match values, mappers,
path resolution, normalization, array-branching fan-out and operator
dispatch. Errors raised along the way become failed results; they never
reach the caller.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from filter_criteria.core.logging import LoggerMixin
from filter_criteria.core.types import (
    UNDEFINED,
    CallbackArgs,
    CriteriaResult,
    CriteriaType,
)
from filter_criteria.evaluation.normalize import TextNormalizer
from filter_criteria.evaluation.path import ResolvedValue, resolve_path
from filter_criteria.operators import evaluate_operator
from filter_criteria.operators.utils import is_sequence, stringify
from filter_criteria.schema.models import CriteriaBase, PathRef
from filter_criteria.schema.validation import validate_criteria

CustomPredicate = Callable[[Any, Any], Union[bool, Awaitable[bool]]]

VALUE_NOT_FOUND = "Value not found in path"

# Match values naming mapping keys; keys are never normalized
KEY_OPERATORS = frozenset({"HAS-KEY"})


async def maybe_await(value: Any) -> Any:
    """Await coroutines and other awaitables, return anything else as-is."""
    if inspect.isawaitable(value):
        return await value
    return value


def check_reason(criteria_type: CriteriaType, operator: str, passed: bool) -> str:
    """e.g. ``Number "LESS" check PASSED``."""
    return f'{criteria_type.value.capitalize()} "{operator}" check {"PASSED" if passed else "FAILED"}'


class CriteriaEvaluator(LoggerMixin):
    """Evaluates single criteria against records."""

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        custom_predicates: Optional[Mapping[str, CustomPredicate]] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            normalizer: Normalizer used when a criterion has ``normalize`` set
            custom_predicates: Named predicates CUSTOM criteria can refer to
        """
        self.normalizer = normalizer or TextNormalizer()
        self.custom_predicates = custom_predicates if custom_predicates is not None else {}

    async def evaluate(
        self,
        record: Any,
        criteria: CriteriaBase,
        context: Any = None,
    ) -> CriteriaResult:
        """
        Evaluate a criterion against a record.

        Args:
            record: Item being filtered
            criteria: Validated criterion
            context: Caller-supplied value handed to callbacks

        Returns:
            CriteriaResult; failures inside callbacks yield ``passed=False``
            with the error message as reason
        """
        try:
            return await self._evaluate(record, criteria, context)
        except Exception as e:
            self.logger.warning(
                "Criteria evaluation failed",
                type=criteria.type,
                alias=criteria.alias,
                error=str(e),
            )
            return CriteriaResult(
                operator=self._operator_name(criteria),
                match_value=self._safe_stringify(criteria.match_value),
                passed=False,
                reason=str(e) or type(e).__name__,
                value=None,
            )

    async def _evaluate(self, record: Any, criteria: CriteriaBase, context: Any) -> CriteriaResult:
        criteria_type = CriteriaType(criteria.type)
        match_value = await self.resolve_match_value(record, criteria, context)

        if criteria_type == CriteriaType.CUSTOM:
            return await self._evaluate_custom(record, criteria, match_value)

        normalize = getattr(criteria, "normalize", False)
        if normalize and self._operator_name(criteria) not in KEY_OPERATORS:
            match_value = self.normalizer.normalize(match_value)

        if criteria.criteria_mapper is not None:
            current = criteria.model_copy(update={"match_value": match_value})
            mapped = await maybe_await(
                criteria.criteria_mapper(CallbackArgs(context=context, criteria=current, value=record))
            )
            if not isinstance(mapped, CriteriaBase):
                mapped = validate_criteria(mapped)
            # Mapped criteria run through the whole procedure again, without their mapper.
            return await self._evaluate(record, mapped.model_copy(update={"criteria_mapper": None}), context)

        value = record
        if criteria.value_mapper is not None:
            value = await maybe_await(
                criteria.value_mapper(CallbackArgs(context=context, criteria=criteria, value=record))
            )

        if criteria.value_path:
            resolved = resolve_path(value, criteria.value_path, criteria.default_value)
        else:
            resolved = ResolvedValue(value=value)

        operator = criteria.operator.value
        value = resolved.value

        # BOOLEAN criteria inspect absence themselves (IS-UNDEFINED, IS-NIL, ...)
        if value is UNDEFINED and criteria_type != CriteriaType.BOOLEAN:
            return CriteriaResult(
                operator=operator,
                match_value=stringify(match_value),
                passed=False,
                reason=VALUE_NOT_FOUND,
                value=None,
            )

        if normalize:
            value = self.normalizer.normalize(value)

        get_coordinates = getattr(criteria, "get_coordinates", None)

        def check(item: Any) -> bool:
            if get_coordinates is not None:
                item = get_coordinates(item)
            return evaluate_operator(criteria_type, item, operator, match_value)

        if resolved.array_branching or (getattr(criteria, "match_in_array", False) and is_sequence(value)):
            passed = any(check(item) for item in value)
        else:
            passed = check(value)

        return CriteriaResult(
            operator=operator,
            match_value=stringify(match_value),
            passed=passed,
            reason=check_reason(criteria_type, operator, passed),
            value=value,
        )

    async def resolve_match_value(self, record: Any, criteria: CriteriaBase, context: Any) -> Any:
        """
        Turn the criterion's match value into a literal.

        ``{"$path": [...]}`` references are read from the record; callables
        are invoked with CallbackArgs and awaited when needed.
        """
        match_value = criteria.match_value

        if isinstance(match_value, PathRef):
            return resolve_path(record, match_value.path).value

        if callable(match_value):
            return await maybe_await(
                match_value(CallbackArgs(context=context, criteria=criteria, value=record))
            )

        return match_value

    async def _evaluate_custom(self, record: Any, criteria: CriteriaBase, match_value: Any) -> CriteriaResult:
        predicate = getattr(criteria, "predicate", None)
        name: Optional[str] = None

        if predicate is None and isinstance(match_value, str):
            name = match_value
            predicate = self.custom_predicates.get(name)

        if predicate is None:
            reason = f'Custom predicate "{name}" not found' if name else "Custom predicate not found"
            return CriteriaResult(
                operator="CUSTOM",
                match_value=stringify(match_value),
                passed=False,
                reason=reason,
                value=record,
            )

        passed = bool(await maybe_await(predicate(match_value, record)))
        label = f'Custom "{name}"' if name else "Custom"

        return CriteriaResult(
            operator="CUSTOM",
            match_value=name or "custom predicate",
            passed=passed,
            reason=f"{label} check {'PASSED' if passed else 'FAILED'}",
            value=record,
        )

    @staticmethod
    def _operator_name(criteria: CriteriaBase) -> str:
        operator = getattr(criteria, "operator", None)
        return operator.value if operator is not None else "CUSTOM"

    @staticmethod
    def _safe_stringify(value: Any) -> str:
        if isinstance(value, PathRef) or callable(value):
            return repr(value)
        return stringify(value)
