"""
Filter Criteria - Normalizer

Case, diacritic and whitespace canonicalization applied recursively through
containers, so comparisons ignore "Develóper" vs "developer" differences.
"""

from __future__ import annotations

import dataclasses
import re
import unicodedata
from collections.abc import Mapping, Set
from typing import Any, Optional

from pydantic import BaseModel

from filter_criteria.core.config import settings
from filter_criteria.core.logging import LoggerMixin
from filter_criteria.operators.utils import to_record

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def deburr(value: str) -> str:
    """Strip combining marks (accents) after NFKD decomposition."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(c for c in decomposed if unicodedata.category(c) != "Mn")


def normalize_text(value: str) -> str:
    """
    Canonicalize a single string.

    Trims, lower-cases, strips diacritics, splits camelCase boundaries,
    turns whitespace runs into dashes, collapses repeated dashes and trims
    leading/trailing dashes.
    """
    value = value.strip()
    value = value.lower()
    value = deburr(value)
    value = _CAMEL_BOUNDARY.sub(r"\1-\2", value)
    value = _WHITESPACE.sub("-", value)
    value = _DASHES.sub("-", value)
    return value.strip("-")


class TextNormalizer(LoggerMixin):
    """
    Recursive normalizer with an explicitly owned string cache.

    Each engine holds its own instance; nothing is shared across instances.
    """

    def __init__(self, cache_size: Optional[int] = None):
        self.max_cache_size = settings.NORMALIZE_CACHE_SIZE if cache_size is None else cache_size
        self._cache: dict[str, str] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Drop every cached string."""
        self._cache.clear()

    def normalize_text(self, value: str) -> str:
        if self.max_cache_size <= 0:
            return normalize_text(value)

        cached = self._cache.get(value)
        if cached is None:
            if len(self._cache) >= self.max_cache_size:
                self.logger.debug("Normalization cache full, clearing", size=len(self._cache))
                self._cache.clear()
            cached = self._cache[value] = normalize_text(value)
        return cached

    def normalize(self, value: Any) -> Any:
        """
        Normalize every string inside a value, keeping its container shape.

        Mapping keys are left untouched. Other attribute-bearing objects are
        returned as dicts of their normalized attributes. Non-string scalars
        (including UNDEFINED) pass through unchanged.
        """
        if isinstance(value, str):
            return self.normalize_text(value)
        if isinstance(value, list):
            return [self.normalize(item) for item in value]
        if isinstance(value, tuple):
            return tuple(self.normalize(item) for item in value)
        if isinstance(value, Mapping):
            return {key: self.normalize(item) for key, item in value.items()}
        if isinstance(value, frozenset):
            return frozenset(self.normalize(item) for item in value)
        if isinstance(value, Set):
            return {self.normalize(item) for item in value}
        if isinstance(value, BaseModel):
            return value.model_copy(
                update={name: self.normalize(getattr(value, name)) for name in type(value).model_fields}
            )
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.replace(
                value,
                **{
                    f.name: self.normalize(getattr(value, f.name))
                    for f in dataclasses.fields(value)
                    if f.init
                },
            )
        record = to_record(value)
        if record is not None:
            # Plain objects become dicts, as OBJECT operators read them
            return {key: self.normalize(item) for key, item in record.items()}
        return value


_default_normalizer = TextNormalizer(cache_size=0)


def normalize(value: Any) -> Any:
    """Uncached module-level normalization."""
    return _default_normalizer.normalize(value)
