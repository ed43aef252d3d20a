"""
Filter Criteria - Alias Registry

Named, reusable criteria. A criterion saved under an alias can be referenced
later as ``{"alias": "name", ...overrides}``; the saved criterion is cloned
and the overrides are applied on top.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel

from filter_criteria.core.exceptions import AliasNotFoundError, InvalidAliasError
from filter_criteria.core.logging import LoggerMixin
from filter_criteria.schema.models import CRITERIA_MODELS, CriteriaBase
from filter_criteria.schema.validation import criteria_fields, validate_criteria

# Field name -> accepted input spellings
OVERRIDABLE_FIELDS: dict[str, tuple[str, ...]] = {
    "criteria_mapper": ("criteria_mapper", "criteriaMapper"),
    "match_in_array": ("match_in_array", "matchInArray"),
    "match_value": ("match_value", "matchValue"),
    "normalize": ("normalize",),
    "operator": ("operator",),
    "value_mapper": ("value_mapper", "valueMapper"),
    "value_path": ("value_path", "valuePath"),
}


def _overrides(reference: Mapping[str, Any]) -> dict[str, Any]:
    """Override fields explicitly present and non-null on a reference."""
    overrides: dict[str, Any] = {}
    for field, spellings in OVERRIDABLE_FIELDS.items():
        for key in spellings:
            if reference.get(key) is not None:
                overrides[field] = reference[key]
                break
    return overrides


class AliasRegistry(LoggerMixin):
    """Keyed store of validated criteria, owned by one engine."""

    def __init__(self):
        self._entries: dict[str, CriteriaBase] = {}

    def __contains__(self, alias: object) -> bool:
        return alias in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def aliases(self) -> list[str]:
        """Saved alias names in insertion order."""
        return list(self._entries)

    def get(self, alias: str) -> Optional[CriteriaBase]:
        return self._entries.get(alias)

    def save(self, criteria: Union[CriteriaBase, Mapping[str, Any]]) -> CriteriaBase:
        """
        Save a criterion under its alias, replacing any previous entry.

        Raises:
            ValidationError: If the criterion is malformed
            InvalidAliasError: If the criterion has no alias
        """
        if not isinstance(criteria, CriteriaBase):
            criteria = validate_criteria(criteria)

        if not criteria.alias or not criteria.alias.strip():
            raise InvalidAliasError("Criteria must have a non-empty alias to be saved")

        replaced = criteria.alias in self._entries
        self._entries[criteria.alias] = criteria
        self.logger.info("Criteria alias saved", alias=criteria.alias, type=criteria.type, replaced=replaced)
        return criteria

    def remove(self, alias: str) -> bool:
        """Remove a saved alias. Returns False if it was not saved."""
        if self._entries.pop(alias, None) is None:
            return False
        self.logger.info("Criteria alias removed", alias=alias)
        return True

    def clear(self) -> None:
        self._entries.clear()

    def resolve(self, reference: Mapping[str, Any]) -> CriteriaBase:
        """
        Build the criterion an alias reference stands for.

        The saved criterion is cloned and every override present on the
        reference is applied. Changing ``type`` also resets ``default_value``
        to the new type's default and re-validates the clone.

        Raises:
            AliasNotFoundError: If the alias was never saved
            ValidationError: If the overridden criterion is invalid
        """
        alias = reference.get("alias")
        saved = self._entries.get(alias) if alias else None
        if saved is None:
            raise AliasNotFoundError(str(alias))

        fields = criteria_fields(saved.model_copy(deep=True))
        new_type = reference.get("type")

        if new_type is not None and new_type != saved.type:
            model = CRITERIA_MODELS.get(new_type)
            if model is not None:
                fields = {
                    name: value
                    for name, value in fields.items()
                    if name in model.model_fields and name != "default_value"
                }
            fields["type"] = new_type
            allowed = model.model_fields if model is not None else fields
        else:
            allowed = type(saved).model_fields

        fields.update({name: value for name, value in _overrides(reference).items() if name in allowed})
        return validate_criteria(fields)

    def resolve_expression(self, expression: Any) -> Any:
        """
        Replace alias references anywhere in a raw expression.

        A criterion mapping counts as a reference when its alias is saved.
        An unknown alias on a mapping without ``type`` is an error; with a
        ``type`` the alias is just a label. Typed models pass through.
        """
        if isinstance(expression, BaseModel) or not isinstance(expression, Mapping):
            return expression

        if "filters" in expression:
            filters = expression["filters"]
            if not isinstance(filters, list):
                return expression
            return {**expression, "filters": [self.resolve_expression(f) for f in filters]}

        if "criteria" in expression:
            criteria = expression["criteria"]
            if not isinstance(criteria, list):
                return expression
            return {**expression, "criteria": [self._resolve_criteria(c) for c in criteria]}

        return self._resolve_criteria(expression)

    def _resolve_criteria(self, raw: Any) -> Any:
        if not isinstance(raw, Mapping) or not raw.get("alias"):
            return raw

        alias = raw["alias"]
        if alias in self._entries:
            return self.resolve(raw)
        if raw.get("type") is None:
            raise AliasNotFoundError(alias)
        return raw
