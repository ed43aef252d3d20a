"""
Tests for filter_criteria/evaluation/normalize.py
"""

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class Person:
    name: str
    age: int


class TestNormalizeText:
    """Tests for single-string normalization."""

    @pytest.mark.parametrize("value,expected", [
        ("Devel  óper", "devel-oper"),
        ("Develóper", "developer"),
        ("  John Doe  ", "john-doe"),
        ("--a   -- b--", "a-b"),
        ("JavaScript", "javascript"),
        ("Ça va", "ca-va"),
    ])
    def test_normalize_text(self, value, expected):
        """Trim, lower-case, de-accent and dash-case."""
        from filter_criteria.evaluation.normalize import normalize_text

        assert normalize_text(value) == expected


class TestNormalize:
    """Tests for recursive normalization."""

    def test_containers_keep_shape(self):
        """Sequences, mappings and sets are normalized element-wise."""
        from filter_criteria.evaluation.normalize import normalize

        assert normalize([1, "Develóper", 3]) == [1, "developer", 3]
        assert normalize(("A B",)) == ("a-b",)
        assert normalize({"Key": "Vál"}) == {"Key": "val"}
        assert normalize({"A", "a"}) == {"a"}
        assert normalize(frozenset({"X"})) == frozenset({"x"})

    def test_records(self):
        """Dataclass and pydantic records are copied with normalized fields."""
        from pydantic import BaseModel
        from filter_criteria.evaluation.normalize import normalize

        class Tag(BaseModel):
            label: str

        assert normalize(Person(name="Jöhn Doe", age=3)) == Person(name="john-doe", age=3)
        assert normalize(Tag(label="Python Dev")).label == "python-dev"

    def test_plain_objects_become_dicts(self):
        """Attribute objects come back as dicts of normalized attributes."""
        from datetime import datetime
        from types import SimpleNamespace
        from filter_criteria.evaluation.normalize import normalize

        class Account:
            def __init__(self):
                self.owner = "John Doe"
                self.tags = ["Python Dev"]

        assert normalize(Account()) == {"owner": "john-doe", "tags": ["python-dev"]}
        assert normalize(SimpleNamespace(city="New York")) == {"city": "new-york"}
        moment = datetime(2024, 1, 1)
        assert normalize(moment) is moment

    def test_scalars_pass_through(self):
        """Non-strings are returned unchanged."""
        from filter_criteria.core.types import UNDEFINED
        from filter_criteria.evaluation.normalize import normalize

        assert normalize(5) == 5
        assert normalize(None) is None
        assert normalize(UNDEFINED) is UNDEFINED
        assert normalize(True) is True

    @pytest.mark.parametrize("value", [
        "Hello  Wörld",
        ["Ab Cd", ["Éf"]],
        {"k": {"n": " Xy  Z "}},
    ])
    def test_idempotent(self, value):
        """normalize(normalize(x)) == normalize(x)."""
        from filter_criteria.evaluation.normalize import normalize

        once = normalize(value)

        assert normalize(once) == once


class TestTextNormalizerCache:
    """Tests for the owned normalization cache."""

    def test_caches_strings(self):
        """Repeated inputs are served from the cache."""
        from filter_criteria.evaluation.normalize import TextNormalizer

        normalizer = TextNormalizer(cache_size=10)
        normalizer.normalize(["A", "A", "B"])

        assert normalizer.cache_size == 2

        normalizer.clear()
        assert normalizer.cache_size == 0

    def test_cache_is_bounded(self):
        """A full cache is cleared before adding more."""
        from filter_criteria.evaluation.normalize import TextNormalizer

        normalizer = TextNormalizer(cache_size=2)
        for text in ["a", "b", "c"]:
            normalizer.normalize_text(text)

        assert normalizer.cache_size == 1

    def test_cache_can_be_disabled(self):
        """Size 0 disables caching."""
        from filter_criteria.evaluation.normalize import TextNormalizer

        normalizer = TextNormalizer(cache_size=0)

        assert normalizer.normalize_text("Ab C") == "ab-c"
        assert normalizer.cache_size == 0

    def test_instances_do_not_share_state(self):
        """Each normalizer owns its cache."""
        from filter_criteria.evaluation.normalize import TextNormalizer

        first, second = TextNormalizer(cache_size=5), TextNormalizer(cache_size=5)
        first.normalize_text("X")

        assert first.cache_size == 1
        assert second.cache_size == 0
