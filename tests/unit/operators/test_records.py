"""
Tests for filter_criteria/operators/objects.py and maps.py
"""

from dataclasses import dataclass

import pytest


@dataclass
class Profile:
    name: str
    skills: list


class TestObjectOperators:
    """Tests for OBJECT predicates."""

    def test_contains_is_recursive_sub_matching(self):
        """Nested keys and array items match loosely."""
        from filter_criteria.operators import objects

        value = {
            "name": "john",
            "address": {"city": "nyc", "zip": "10001"},
            "pets": [{"kind": "dog", "age": 3}, {"kind": "cat", "age": 1}],
        }

        assert objects.evaluate(value, "CONTAINS", {"address": {"city": "nyc"}})
        assert objects.evaluate(value, "CONTAINS", {"pets": [{"kind": "cat"}]})
        assert not objects.evaluate(value, "CONTAINS", {"pets": [{"kind": "fish"}]})
        assert not objects.evaluate(value, "CONTAINS", {"missing": 1})

    def test_keys_values_and_sizes(self):
        """Key, value and size operators."""
        from filter_criteria.operators import objects

        value = {"a": 1, "b": [1, 2]}

        assert objects.evaluate(value, "HAS-KEY", "a")
        assert not objects.evaluate(value, "HAS-KEY", "z")
        assert objects.evaluate(value, "HAS-VALUE", [1, 2])
        assert objects.evaluate(value, "SIZE-EQUALS", 2)
        assert objects.evaluate(value, "NOT-EMPTY", None)
        assert objects.evaluate({}, "IS-EMPTY", None)

    def test_dataclass_records(self):
        """Attribute-bearing objects are read like mappings."""
        from filter_criteria.operators import objects

        profile = Profile(name="jane", skills=["ui", "ux"])

        assert objects.evaluate(profile, "HAS-KEY", "skills")
        assert objects.evaluate(profile, "CONTAINS", {"skills": ["ux"]})

    @pytest.mark.parametrize("value", ["text", 3, ["a"], None])
    def test_non_records_are_false(self, value):
        """Scalars and sequences are not objects."""
        from filter_criteria.operators import objects

        assert objects.evaluate(value, "NOT-EMPTY", None) is False

    def test_unhashable_key_is_false(self):
        """HAS-KEY with an unhashable operand does not raise."""
        from filter_criteria.operators import objects

        assert objects.evaluate({"a": 1}, "HAS-KEY", ["a"]) is False


class TestMapOperators:
    """Tests for MAP predicates."""

    def test_map_operators(self):
        """MAP mirrors OBJECT on mappings."""
        from filter_criteria.operators import maps

        value = {"key-1": "value-1", "key-2": {"nested": True}}

        assert maps.evaluate(value, "HAS-KEY", "key-1")
        assert maps.evaluate(value, "HAS-VALUE", "value-1")
        assert maps.evaluate(value, "CONTAINS", {"key-2": {"nested": True}})
        assert maps.evaluate(value, "SIZE-GREATER", 1)

    def test_requires_a_mapping(self):
        """Dataclasses are objects, not maps."""
        from filter_criteria.operators import maps

        assert maps.evaluate(Profile(name="x", skills=[]), "HAS-KEY", "name") is False
